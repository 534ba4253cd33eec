"""Interactive text menu over the counting engine."""

from collections.abc import Callable
from dataclasses import dataclass

from itemcounter.counting.engine import CountResult, count
from itemcounter.counting.errors import EmptyInput
from itemcounter.counting.kinds import SupportedKind

Reader = Callable[[str], str]
Writer = Callable[[str], None]


@dataclass(frozen=True)
class MenuEntry:
    label: str
    kind: SupportedKind
    prompt: str
    heading: str
    example: str | None = None


MENU: dict[str, MenuEntry] = {
    "1": MenuEntry(
        "Count words/strings", SupportedKind.TEXT,
        "Enter words/strings separated by spaces:", "Counting strings:",
    ),
    "2": MenuEntry(
        "Count integers", SupportedKind.INTEGER,
        "Enter integers separated by spaces:", "Counting integers:",
    ),
    "3": MenuEntry(
        "Count doubles", SupportedKind.DECIMAL,
        "Enter decimal numbers separated by spaces:", "Counting doubles:",
    ),
    "4": MenuEntry(
        "Count characters", SupportedKind.CHARACTER,
        "Enter text (each character will be counted):", "Counting characters:",
    ),
    "5": MenuEntry(
        "Count booleans", SupportedKind.BOOLEAN,
        "Enter boolean values separated by spaces (true/false, yes/no, 1/0):",
        "Counting booleans:",
    ),
    "6": MenuEntry(
        "Count dates", SupportedKind.DATE,
        "Enter dates separated by spaces (format: MM/dd/yyyy or yyyy-MM-dd):",
        "Counting dates:",
        example="Example: 01/15/2024 2024-12-25 03/10/2023",
    ),
}
START_API_OPTION = "7"
EXIT_OPTION = "8"


def split_line(line: str, kind: SupportedKind) -> list[str]:
    """Tokenize one input line. Character input stays a single blob."""
    if kind is SupportedKind.CHARACTER:
        return [line] if line else []
    return line.split()


def render_result(result: CountResult) -> list[str]:
    if result.error is not None:
        return [result.error.message]
    return [f"{label}: {n} occurrence(s)" for label, n in result.table.items()]


def run_entry(entry: MenuEntry, read: Reader, write: Writer) -> None:
    write(f"\n{entry.prompt}")
    if entry.example:
        write(entry.example)
    line = read("")

    items = split_line(line, entry.kind)
    result = count(items, entry.kind)
    if isinstance(result.error, EmptyInput):
        write("No input provided.")
        return
    if result.ok:
        write(f"\n{entry.heading}")
    for text in render_result(result):
        write(text)


def run_menu(read: Reader = input, write: Writer = print) -> None:
    """Loop until the user exits or input runs out."""
    while True:
        write("\n=== Item Counter ===")
        for key, entry in MENU.items():
            write(f"{key}. {entry.label}")
        write(f"{START_API_OPTION}. Start Web API")
        write(f"{EXIT_OPTION}. Exit")

        try:
            choice = read("Choose an option (1-8): ").strip()
            if choice in MENU:
                run_entry(MENU[choice], read, write)
            elif choice == START_API_OPTION:
                write("To run the Web API, start it with: itemcounter serve")
            elif choice == EXIT_OPTION:
                write("Goodbye!")
                return
            else:
                write("Invalid option. Please try again.")
        except EOFError:
            write("Goodbye!")
            return
