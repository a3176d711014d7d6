import sys
from typing import Callable, Dict

from hashbag.cli import compare, count
from hashbag.utils.config import get_error_message_for_missing_value


def main() -> None:
    supported_commands: Dict[str, Callable] = {
        "count": count.main,
        "compare": compare.main,
    }
    supported_command_names = list(supported_commands.keys())

    if len(sys.argv) == 1:
        raise ValueError(get_error_message_for_missing_value("Command", supported_command_names))

    command = sys.argv[1]
    if command not in supported_commands:
        raise ValueError(
            f"Command {command} not supported; "
            + get_error_message_for_missing_value("command", supported_command_names)
        )

    # Drop the subcommand name and let the chosen command parse the rest of the arguments.
    del sys.argv[1]
    supported_commands[command]()


if __name__ == "__main__":
    main()
