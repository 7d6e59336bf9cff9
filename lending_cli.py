#!/usr/bin/env python3
"""
lending_cli.py

Interactive text menus for the lending catalog: a borrower desk and an
employee desk sharing one in-memory Catalog for the life of the process.

Typical usage:
    python lending_cli.py
    python lending_cli.py --loan-days 21 --log-level INFO
    python lending_cli.py --report
"""
from __future__ import annotations
import argparse
import logging
import os
import re
import sys
from typing import List, Optional, Tuple

from lending_catalog import DEFAULT_LOAN_DAYS, Book, Catalog, preload_books

logger = logging.getLogger("LendingCLI")

WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


class SessionClosed(Exception):
    """Raised when input ends (EOF or Ctrl-C) so the session can unwind."""


# ---------------- Console helpers ----------------
def input_prompt(prompt: str, strip: bool = True) -> str:
    """
    Wrapper around built-in input() that returns the typed line.

    Raises SessionClosed on EOF/KeyboardInterrupt.
    """
    try:
        raw = input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        raise SessionClosed()
    return raw.strip() if strip else raw


def input_int(prompt: str) -> int:
    """
    Prompt until the user types a whole number.
    """
    while True:
        raw = input_prompt(prompt)
        if WHOLE_NUMBER.fullmatch(raw):
            return int(raw)
        logger.debug("Rejected non-numeric input: %r", raw)
        print("Please enter a whole number.")


def clear_console() -> None:
    # Only wipe a real terminal; piped or captured output is left alone.
    if sys.stdout.isatty():
        os.system("cls" if os.name == "nt" else "clear")


def pause() -> None:
    input_prompt("Press Enter to continue...", strip=False)


def print_book_entries(entries: List[Tuple[int, Book]]) -> None:
    for book_id, book in entries:
        print(f"Book ID: {book_id}")
        print(book.details())
        print()


# ---------------- Employee desk ----------------
def print_employee_menu():
    clear_console()
    print("\nLibrary Management System")
    print("1. Add a new book")
    print("2. Remove a book by ID")
    print("3. Find a book by ID")
    print("4. Print all books")
    print("5. Exit")


def employee_loop(lib: Catalog):
    """
    Command loop for library staff: add, remove, find and list books.
    """
    while True:
        print_employee_menu()
        choice = input_prompt("Enter your choice: ")
        if choice == "1":
            title = input_prompt("Enter title: ")
            author = input_prompt("Enter author: ")
            isbn = input_prompt("Enter ISBN: ")
            year = input_int("Enter publication year: ")
            book_id = lib.add_book(title, author, isbn, year)
            print(f"Book added with ID: {book_id}")
        elif choice == "2":
            book_id = input_int("Enter book ID to remove: ")
            print("Book removed." if lib.remove_book(book_id) else "Book not found.")
        elif choice == "3":
            book_id = input_int("Enter book ID to find: ")
            book = lib.find_book(book_id)
            print(book.details() if book is not None else "Book not found.")
        elif choice == "4":
            print_book_entries(lib.list_all())
        elif choice == "5":
            print("Exiting the library system.")
            break
        else:
            print("Invalid choice. Please try again.")
        pause()


# ---------------- Borrower desk ----------------
def print_borrower_menu():
    clear_console()
    print("\nBorrower System")
    print("1. Search for a book")
    print("2. Borrow a book")
    print("3. Return a book")
    print("4. List all available books")
    print("5. List my borrowed books")
    print("6. Exit")


def borrower_loop(lib: Catalog):
    """
    Command loop for a borrower identified by the name typed on entry.
    """
    borrower = input_prompt("Enter your name: ", strip=False)
    while True:
        print_borrower_menu()
        choice = input_prompt("Enter your choice: ")
        if choice == "1":
            query = input_prompt("Enter search query (title, author, ISBN, ID, or publication year): ",
                                 strip=False)
            results = lib.search(query)
            if results:
                print_book_entries(results)
            else:
                print("No books found matching the query.")
        elif choice == "2":
            book_id = input_int("Enter book ID to borrow: ")
            if lib.borrow_book(book_id, borrower):
                print("Book borrowed successfully.")
            else:
                print("Book is not available or not found.")
        elif choice == "3":
            book_id = input_int("Enter book ID to return: ")
            if lib.return_book(book_id, borrower):
                print("Book returned successfully.")
            else:
                print("Book was not borrowed or not found.")
        elif choice == "4":
            print_book_entries(lib.list_available())
        elif choice == "5":
            borrowed = lib.list_borrowed(borrower)
            if borrowed:
                print_book_entries(borrowed)
            else:
                print(f"No books borrowed by {borrower}.")
        elif choice == "6":
            print("Exiting the borrowing system.")
            break
        else:
            print("Invalid choice. Please try again.")
        pause()


# ---------------- Main menu ----------------
def print_main_menu():
    clear_console()
    print("\nWelcome to the Library")
    print("1. Enter as a person who wants to borrow a book")
    print("2. Enter as an employee")


def main_loop(lib: Catalog):
    """
    Top-level menu. Runs until input ends.
    """
    while True:
        print_main_menu()
        choice = input_prompt("Enter your choice: ")
        if choice == "1":
            borrower_loop(lib)
        elif choice == "2":
            employee_loop(lib)
        else:
            print("Invalid choice. Please try again.")
            pause()


def print_reports(lib: Catalog) -> None:
    books = lib.export_report_books()
    print(f"Books ({len(books)}):")
    print(books.to_string(index=False) if not books.empty else "(none)")
    borrowers = lib.export_report_borrowers()
    print(f"\nBorrowers with loans ({len(borrowers)}):")
    print(borrowers.to_string(index=False) if not borrowers.empty else "(none)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory book lending catalog")
    parser.add_argument("--loan-days", type=int, default=DEFAULT_LOAN_DAYS,
                        help=f"length of a loan in days (default {DEFAULT_LOAN_DAYS})")
    parser.add_argument("--no-seed", action="store_true", help="start with an empty catalog")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    parser.add_argument("--report", action="store_true",
                        help="print the inventory and borrower reports, then exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    if args.loan_days <= 0:
        print("--loan-days must be a positive number of days.", file=sys.stderr)
        return 2
    lib = Catalog(loan_days=args.loan_days)
    if not args.no_seed:
        preload_books(lib)

    if args.report:
        print_reports(lib)
        return 0

    try:
        main_loop(lib)
    except SessionClosed:
        logger.info("Input closed, ending session")
    print("Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
