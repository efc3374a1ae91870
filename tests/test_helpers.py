"""
Test helper handlers shared across test modules
"""
import io

from linecli.cli.commands.base import CliHandler


class RecordingHandler(CliHandler):
    """Handler that answers every command with "<command> ok" and records calls"""

    def __init__(self, commands, reply=None):
        super().__init__()
        self.commands = set(commands)
        self.reply = reply
        self.calls = []

    def get_commands(self):
        return set(self.commands)

    def handle_command(self, command, args, writer):
        self.calls.append((command, list(args)))
        writer.write(f"{self.reply or command + ' ok'}\n")


class RaisingHandler(CliHandler):
    """Handler that raises the given exception for every command"""

    def __init__(self, commands, error):
        super().__init__()
        self.commands = set(commands)
        self.error = error

    def get_commands(self):
        return set(self.commands)

    def handle_command(self, command, args, writer):
        raise self.error


class FailingWriter:
    """Text stream whose writes fail like a closed terminal"""

    def write(self, text):
        raise OSError("Broken pipe")

    def flush(self):
        pass


class FailingReader:
    """Text stream whose reads fail like a lost terminal"""

    def readline(self):
        raise OSError("Input/output error")


class FailingAfterPromptWriter(io.StringIO):
    """Text stream that accepts the first write and fails every later one"""

    def write(self, text):
        if self.getvalue():
            raise OSError("Broken pipe")
        return super().write(text)
