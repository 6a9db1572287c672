import logging
from typing import Callable, Dict, Optional

import click

from config import Config, configure_logging
from models import ItemStatus, Role, User
from services import RecordStore

logger = logging.getLogger(__name__)


MENU_OPTIONS = [
    "Report a Lost Item",
    "Report a Found Item",
    "View All Reported Items",
    "Search for an Item by Name",
    "Find Potential Matches",
    "Mark an Item as Returned (Admin)",
    "Exit",
]
EXIT_CHOICE = len(MENU_OPTIONS)


def default_operator(config=Config) -> User:
    role = Role.ADMIN if config.OPERATOR_IS_ADMIN else Role.REGULAR
    return User(user_id=1, name=config.OPERATOR_NAME, contact_details=config.OPERATOR_CONTACT, role=role)


def _ask(text: str) -> str:
    # Empty answers are valid field values, so never let click re-prompt.
    return click.prompt(text, default="", show_default=False)


def print_menu(config=Config) -> None:
    click.echo(f"\n--- {config.APP_TITLE} ---")
    for number, label in enumerate(MENU_OPTIONS, start=1):
        click.echo(f"{number}. {label}")


def report_item(store: RecordStore, status: ItemStatus) -> None:
    name = _ask("Enter item name")
    description = _ask("Enter a brief description")
    location = _ask(f"Enter the location where the item was {status.value.lower()}")

    record = store.report(name, description, location, status)
    click.echo(f"\nSuccessfully reported! The new Item ID is: {record.id}")


def view_all_items(store: RecordStore) -> None:
    click.echo("\n--- All Reported Items ---")
    items = store.list_all()
    if not items:
        click.echo("No items have been reported yet.")
        return
    for item in items:
        click.echo(str(item))


def search_items(store: RecordStore) -> None:
    query = _ask("Enter the name of the item to search for")
    results = store.search_by_name(query)

    click.echo("\n--- Search Results ---")
    if not results:
        click.echo("No items found with that name.")
        return
    for item in results:
        click.echo(str(item))


def match_items(store: RecordStore) -> None:
    click.echo("\n--- Potential Matches ---")
    matches = store.find_potential_matches()
    if not matches:
        click.echo("No potential matches found at this time.")
        return
    for match in matches:
        click.echo("Potential Match Found:")
        click.echo(f"  Lost Item -> {match.lost}")
        click.echo(f"  Found Item -> {match.found}")


def mark_item_as_returned(store: RecordStore, operator: User) -> None:
    if not operator.is_admin:
        logger.info("Operator %s attempted to mark an item as returned", operator.name)
        click.echo("Only administrators can mark items as returned.")
        return

    raw_id = _ask("Enter the ID of the item to mark as returned")
    try:
        item_id = int(raw_id)
    except ValueError:
        click.echo("Invalid ID. Please enter a number.")
        return

    if store.mark_returned(item_id) is None:
        click.echo(f"Item with ID {item_id} not found.")
        return
    click.echo(f"Item ID {item_id} has been marked as Returned.")


def run_menu(store: RecordStore, operator: Optional[User] = None, config=Config) -> None:
    """Drive the numbered menu until the user exits or input runs out."""
    operator = operator or default_operator(config)
    actions: Dict[int, Callable[[], None]] = {
        1: lambda: report_item(store, ItemStatus.LOST),
        2: lambda: report_item(store, ItemStatus.FOUND),
        3: lambda: view_all_items(store),
        4: lambda: search_items(store),
        5: lambda: match_items(store),
        6: lambda: mark_item_as_returned(store, operator),
    }
    farewell = f"Thank you for using the {config.APP_TITLE}!"

    while True:
        print_menu(config)
        try:
            raw_choice = _ask("Enter your choice")
            try:
                choice = int(raw_choice)
            except ValueError:
                click.echo("Invalid input. Please enter a number.")
                continue

            if choice == EXIT_CHOICE:
                click.echo(farewell)
                return
            action = actions.get(choice)
            if action is None:
                click.echo(f"Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}.")
                continue
            action()
        except click.Abort:
            # End of input behaves like choosing Exit.
            click.echo(f"\n{farewell}")
            return


@click.command()
def main() -> None:
    """Interactive console for campus lost-and-found reports."""
    configure_logging(Config)
    run_menu(RecordStore())


if __name__ == "__main__":
    main()
