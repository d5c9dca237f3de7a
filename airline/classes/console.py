import sys

from airline.exceptions import ValidationError


class EndOfInput(Exception):
    """The input stream is exhausted; the session should end."""


class Console:
    """
    Console I/O for a menu session.

    Streams are injected so tests can drive a session with scripted input
    and inspect everything that was printed.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text=''):
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def read_line(self, prompt):
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == '':
            raise EndOfInput()
        return line.rstrip('\r\n')

    def read_choice(self):
        """Re-prompts until a whole number is entered."""
        while True:
            try:
                return int(self.read_line("Please make your choice: ").strip())
            except ValueError:
                self.say("Your input is invalid!")

    def ask(self, prompt, validator=None):
        """
        Reads a field, re-prompting with the validator's message until it passes.
        Returns the validator's normalized value.
        """
        while True:
            value = self.read_line(prompt).strip()
            if validator is None:
                return value
            try:
                return validator(value)
            except ValidationError as e:
                self.say(e.message)

    def print_rows(self, rows, empty_message):
        """Tab-separated header plus one line per row. Returns the row count."""
        if not rows:
            self.say(empty_message)
            return 0

        self.say('\t'.join(rows[0].keys()))
        for row in rows:
            self.say('\t'.join('null' if value is None else str(value) for value in row.values()))
        return len(rows)
