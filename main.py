"""CLI entry point for the Transaction Analyzer."""

import argparse
import json
import sys
from pathlib import Path

from transaction_analyzer.analyzer import TransactionAnalyzer
from transaction_analyzer.config import settings
from transaction_analyzer.data.storage import load_analyzer
from transaction_analyzer.errors import TransactionValidationError
from transaction_analyzer.utils.logging import AuditLogger, get_logger
from transaction_analyzer.utils.session import set_current_analyzer


MENU = """
Choose an option (enter its number):
1.  Show unique transaction types
2.  Show total amount of all transactions
3.  Show total amount for a period (year, month, day)
4.  Show transactions of a type
5.  Show transactions in a date range
6.  Show transactions for a merchant
7.  Show average transaction amount
8.  Show transactions in an amount range
9.  Show total debit amount
10. Show month with the most transactions
11. Show month with the most debit transactions
12. Show dominant transaction type
13. Show transactions before a date
14. Find transaction by ID
15. Show transaction descriptions
16. Add a new transaction
17. Show all transactions
0.  Exit
"""


def _ask(prompt: str, default: object | None = None) -> str:
    """Prompt for a value, returning the default as text on empty input."""
    suffix = f" [{default}]" if default is not None else ""
    answer = input(f"{prompt}{suffix}: ").strip()
    if not answer and default is not None:
        return str(default)
    return answer


def _ask_optional_int(prompt: str, default: int | None) -> int | None:
    """Prompt for an integer; '-' means the criterion is not applied."""
    answer = _ask(f"{prompt} ('-' to skip)", default)
    if answer == "-":
        return None
    return int(answer)


def _print_transactions(title: str, transactions: list) -> None:
    print(f"\n{title}: {len(transactions)} found")
    for txn in transactions:
        d = txn.to_display_dict()
        print(
            f"  {d['id']} | {d['date']} | {d['amount']} | {d['type']} | "
            f"{d['merchant']} | {d['description']}"
        )


def _add_transaction(analyzer: TransactionAnalyzer) -> None:
    """Prompt for the fields of a new transaction and append it."""
    audit = AuditLogger(settings.log_dir, source="cli", level=settings.log_level)
    transaction = {"id": analyzer.next_id()}
    print(f"\nCreating a new transaction with ID: {transaction['id']}")

    transaction["date"] = _ask("Date (YYYY-MM-DD)")
    amount = _ask("Amount")
    try:
        transaction["amount"] = float(amount)
    except ValueError:
        transaction["amount"] = amount

    transaction_type = ""
    while transaction_type not in ("debit", "credit"):
        transaction_type = _ask("Type (debit/credit)")
    transaction["type"] = transaction_type

    transaction["description"] = _ask("Description")
    transaction["merchant_name"] = _ask("Merchant name")
    transaction["card_type"] = _ask("Card type")

    try:
        analyzer.append(transaction)
    except TransactionValidationError as e:
        audit.log_transaction_rejected(e.kind, e.field, str(e))
        print(f"\nCould not add transaction: {e}")
        return

    audit.log_transaction_added(transaction["id"], transaction["amount"], transaction_type)
    print("\nTransaction added.")


def handle_choice(analyzer: TransactionAnalyzer, choice: str) -> bool:
    """Run one menu option. Returns False when the user chose to exit."""
    defaults = settings.menu_defaults

    if choice == "0":
        print("\nGoodbye!")
        return False

    elif choice == "1":
        print("\nUnique transaction types:", analyzer.unique_types())

    elif choice == "2":
        print("\nTotal amount:", analyzer.total_amount())

    elif choice == "3":
        year = _ask_optional_int("Year", defaults.year)
        month = _ask_optional_int("Month", defaults.month)
        day = _ask_optional_int("Day", defaults.day)
        print(
            f"\nTotal for year={year} month={month} day={day}:",
            analyzer.total_amount_by_period(year, month, day),
        )

    elif choice == "4":
        transaction_type = _ask("Type", defaults.transaction_type)
        _print_transactions(
            f"{transaction_type} transactions",
            analyzer.transactions_by_type(transaction_type),
        )

    elif choice == "5":
        start = _ask("Start date", defaults.range_start)
        end = _ask("End date", defaults.range_end)
        _print_transactions(
            f"Transactions from {start} to {end}",
            analyzer.transactions_in_date_range(start, end),
        )

    elif choice == "6":
        merchant = _ask("Merchant", defaults.merchant_name)
        _print_transactions(
            f"Transactions at {merchant}",
            analyzer.transactions_by_merchant(merchant),
        )

    elif choice == "7":
        print("\nAverage amount:", analyzer.average_amount())

    elif choice == "8":
        min_amount = float(_ask("Minimum amount", defaults.min_amount))
        max_amount = float(_ask("Maximum amount", defaults.max_amount))
        _print_transactions(
            f"Transactions from {min_amount} to {max_amount}",
            analyzer.transactions_by_amount_range(min_amount, max_amount),
        )

    elif choice == "9":
        print("\nTotal debit amount:", analyzer.total_debit_amount())

    elif choice == "10":
        print("\nMonth with the most transactions:", analyzer.month_with_most_transactions())

    elif choice == "11":
        print(
            "\nMonth with the most debit transactions:",
            analyzer.month_with_most_debit_transactions(),
        )

    elif choice == "12":
        print("\nDominant transaction type:", analyzer.dominant_type())

    elif choice == "13":
        cutoff = _ask("Cutoff date", defaults.cutoff_date)
        _print_transactions(
            f"Transactions before {cutoff}",
            analyzer.transactions_before_date(cutoff),
        )

    elif choice == "14":
        transaction_id = _ask("Transaction ID", defaults.transaction_id)
        txn = analyzer.find_by_id(transaction_id)
        if txn is None:
            print(f"\nTransaction {transaction_id} not found.")
        else:
            print(f"\nTransaction {transaction_id}:")
            print(json.dumps(txn.to_display_dict(), indent=2))

    elif choice == "15":
        preview = analyzer.descriptions()[: settings.descriptions_preview]
        print(f"\nFirst {len(preview)} descriptions:", preview)

    elif choice == "16":
        _add_transaction(analyzer)

    elif choice == "17":
        _print_transactions("All transactions", analyzer.all_transactions())

    else:
        print(f"\nUnknown option: {choice}")
        print("Enter a number from the menu.")

    return True


def run_menu(analyzer: TransactionAnalyzer):
    """Run the interactive menu until the user exits."""
    print("=" * 60)
    print("Transaction Analyzer")
    print("=" * 60)
    print(f"Loaded transactions: {len(analyzer)}")

    while True:
        try:
            print(MENU)
            choice = input("Your choice: ").strip()
            try:
                if not handle_choice(analyzer, choice):
                    break
            except ValueError as e:
                print(f"\nInvalid input: {e}")

        except KeyboardInterrupt:
            print("\n\nGoodbye!")
            break
        except EOFError:
            print("\n\nGoodbye!")
            break


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Transaction Analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                              # Use the configured transactions file
  python main.py --data-file my.json          # Load a specific file
  python main.py --log-level DEBUG            # Verbose logging
        """,
    )

    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help=f"Transactions JSON file (default: {settings.transactions_file})",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args()

    if args.log_level:
        settings.log_level = args.log_level
        for name in ("analyzer", "storage"):
            get_logger(name, args.log_level)

    try:
        analyzer = load_analyzer(args.data_file)
    except (OSError, ValueError) as e:
        print(f"Error loading transactions: {e}")
        sys.exit(1)

    set_current_analyzer(analyzer)
    run_menu(analyzer)


if __name__ == "__main__":
    main()
