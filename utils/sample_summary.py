from tabulate import tabulate


def get_summary(sample_lines):
    """Get a formatted table of the variables written to a sample file."""
    variables = [line for line in sample_lines if line.kind == 'variable']

    if not variables:
        return "No variables found."

    table = [[line.name, line.value, line.source] for line in variables]
    examples_used = sum(1 for line in variables if line.source == 'example')

    return (
        tabulate(table, headers=['Variable', 'Value', 'Source'], tablefmt='grid', disable_numparse=True)
        + f"\n{len(variables)} variable(s), {examples_used} with example values"
    )
