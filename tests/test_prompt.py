import io

import pytest

from mockshell.commands import AbstractCommand
from mockshell.errors import CommandInsertError, InvalidUsageError
from mockshell.prompt import CommandPrompt


class CommandTest(AbstractCommand):
    def __init__(self, out):
        self.out = out

    def execute(self, info):
        if info == "":
            self.out.write("command-test-no-info\n")
        else:
            self.out.write("\n" + info.replace(" ", ":") + "\n\n")

    def display_info(self):
        self.out.write("aRandomStringz\n")


class FailingCommand(AbstractCommand):
    def execute(self, info):
        raise InvalidUsageError(info)

    def display_info(self):
        pass


def make_prompt(text):
    out = io.StringIO()
    prompt = CommandPrompt(None, None, io.StringIO(text), out)
    prompt.add_command("cmd", CommandTest(out))
    return prompt, out


def test_run_command_without_info():
    prompt, out = make_prompt("cmd\nq\n")
    prompt.run()
    assert "command-test-no-info\n" in out.getvalue()


def test_run_command_with_info():
    prompt, out = make_prompt("cmd a b c\nq\n")
    prompt.run()
    assert "\na:b:c\n\n" in out.getvalue()


def test_run_strips_spaces_before_arguments():
    prompt, out = make_prompt("cmd    x y\nq\n")
    prompt.run()
    assert "\nx:y\n\n" in out.getvalue()


def test_help_for_command_shows_its_info():
    prompt, out = make_prompt("help cmd\nq\n")
    prompt.run()
    assert "aRandomStringz\n" in out.getvalue()


def test_help_lists_commands_sorted():
    prompt, out = make_prompt("help\nq\n")
    prompt.add_command("alpha", CommandTest(out))
    prompt.run()
    assert "alpha\ncmd\n" in out.getvalue()


@pytest.mark.parametrize("line", ["nothing", "nothing at all", "help nothing"])
def test_unknown_command(line):
    prompt, out = make_prompt(line + "\nq\n")
    prompt.run()
    assert "Command does not exist" in out.getvalue()


def test_failing_command_reports_failure():
    prompt, out = make_prompt("bad arg\nq\n")
    prompt.add_command("bad", FailingCommand())
    prompt.run()
    assert "Command failed" in out.getvalue()


def test_duplicate_command_name_rejected():
    prompt, out = make_prompt("")
    with pytest.raises(CommandInsertError):
        prompt.add_command("cmd", CommandTest(out))


def test_prompt_skips_blank_lines():
    prompt, out = make_prompt("\n   \n  cmd x\n")
    assert prompt.prompt() == "cmd x"
    assert out.getvalue().count("$  ") == 1


def test_prompt_at_end_of_input_quits():
    prompt, out = make_prompt("")
    assert prompt.prompt() == "q"
    prompt.run()
    assert "command-test-no-info" not in out.getvalue()