import io

from airline.classes.console import Console


def scripted_console(*lines):
    """Console fed from the given input lines; output collected in .stdout."""
    stdin = io.StringIO(''.join(f"{line}\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO())


def output_of(console):
    return console.stdout.getvalue()
