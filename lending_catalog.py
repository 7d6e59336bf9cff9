#!/usr/bin/env python3
"""
lending_catalog.py

In-memory book-lending catalog: books keyed by an auto-incrementing id plus a
map of borrower names to the ids they currently hold.
"""

from __future__ import annotations
import datetime
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

# Configuration
DEFAULT_LOAN_DAYS = 14

# Logging
logger = logging.getLogger("LendingCatalog")

# Preset books loaded at startup for demos: (title, author, isbn, year)
SEED_BOOKS: List[Tuple[str, str, str, int]] = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "9780743273565", 1925),
    ("To Kill a Mockingbird", "Harper Lee", "9780060935467", 1960),
    ("1984", "George Orwell", "9780451524935", 1949),
    ("Pride and Prejudice", "Jane Austen", "9781503290563", 1813),
    ("The Catcher in the Rye", "J.D. Salinger", "9780316769488", 1951),
    ("The Hobbit", "J.R.R. Tolkien", "9780547928227", 1937),
    ("Fahrenheit 451", "Ray Bradbury", "9781451673319", 1953),
    ("Moby Dick", "Herman Melville", "9781503280786", 1851),
    ("War and Peace", "Leo Tolstoy", "9781400079988", 1869),
    ("The Odyssey", "Homer", "9780140268867", -800),  # approximate year
]

BOOK_REPORT_COLUMNS = ["Book ID", "Title", "Author", "ISBN", "Publication Year", "Availability", "Due Date", "Overdue"]
BORROWER_REPORT_COLUMNS = ["Borrower", "BorrowedCount", "BorrowedBooks"]


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def format_due_date(due_date: datetime.datetime) -> str:
    """Render a timestamp in local time, asctime style (e.g. 'Mon Nov  2 14:05:09 2026')."""
    return due_date.astimezone().ctime()


@dataclass
class Book:
    """
    A single copy in the catalog.

    Title, author, ISBN and publication year never change after creation; only
    `available` and `due_date` move as the book is lent out and returned.
    `due_date` is meaningful only while `available` is False.
    """
    book_id: int
    title: str
    author: str
    isbn: str
    publication_year: int
    available: bool = True
    due_date: Optional[datetime.datetime] = None

    def is_overdue(self, now: Optional[datetime.datetime] = None) -> bool:
        """
        True while on loan past the due date. A naive `now` is read as local time.
        """
        if self.available or self.due_date is None:
            return False
        if now is None:
            now = utc_now()
        elif now.tzinfo is None:
            now = now.astimezone()
        return now > self.due_date

    def details(self) -> str:
        """
        Multi-line description of the book as shown by the menus.

        The due date line is only present while the book is on loan.
        """
        lines = [
            f"Title: {self.title}",
            f"Author: {self.author}",
            f"ISBN: {self.isbn}",
            f"Publication Year: {self.publication_year}",
            f"Available: {'Yes' if self.available else 'No'}",
        ]
        if not self.available and self.due_date is not None:
            lines.append(f"Due Date: {format_due_date(self.due_date)}")
        return "\n".join(lines)


class Catalog:
    """
    Catalog owns every Book and the borrower-to-loans map.

    Books live in a plain dict keyed by id; ids come from a counter that only
    ever grows, so removed ids are never handed out again. Lookups that miss
    return None / False / an empty list rather than raising.

    Removing a book leaves any loan entries pointing at it in place, and any
    borrower name may return any borrowed book. Listing borrowed books skips
    ids that no longer resolve.
    """

    def __init__(self,
                 loan_days: int = DEFAULT_LOAN_DAYS,
                 clock: Optional[Callable[[], datetime.datetime]] = None):
        """
        Initialize an empty Catalog.

        Args:
            loan_days: length of a loan in days.
            clock: zero-argument callable returning the current aware datetime.
        """
        if int(loan_days) <= 0:
            raise ValueError(f"loan_days must be positive, got {loan_days!r}")
        self.loan_days = int(loan_days)
        self._clock = clock or utc_now

        self.books: Dict[int, Book] = {}
        self.borrowed_books: Dict[str, List[int]] = {}
        self.next_id = 1

    # ---------------- Employee operations ----------------
    def add_book(self, title: str, author: str, isbn: str, publication_year: int) -> int:
        """
        Add a new available book and return its freshly allocated id.
        """
        book_id = self.next_id
        self.next_id += 1
        self.books[book_id] = Book(book_id, title, author, isbn, int(publication_year))
        logger.info("Added book %d: %s", book_id, title)
        return book_id

    def remove_book(self, book_id: int) -> bool:
        """
        Remove a book by id.

        Returns True if a book was removed, False if the id was unknown.
        Loan entries that reference the id are left untouched.
        """
        book = self.books.pop(book_id, None)
        if book is None:
            logger.debug("Attempt to remove unknown book: %s", book_id)
            return False
        logger.info("Removed book %d: %s", book_id, book.title)
        return True

    def find_book(self, book_id: int) -> Optional[Book]:
        return self.books.get(book_id)

    def list_all(self) -> List[Tuple[int, Book]]:
        return list(self.books.items())

    def list_available(self) -> List[Tuple[int, Book]]:
        return [(book_id, book) for book_id, book in self.books.items() if book.available]

    # ---------------- Borrower operations ----------------
    def search(self, query: str) -> List[Tuple[int, Book]]:
        """
        Case-insensitive search across title, author, ISBN, id and year.

        Title, author and ISBN match on substring; id and publication year must
        equal the query exactly in their decimal form. An empty query is a
        substring of everything and so matches every book.
        """
        q = query.lower()
        results = []
        for book_id, book in self.books.items():
            if (q in book.title.lower() or q in book.author.lower() or q in book.isbn.lower()
                    or query == str(book_id) or query == str(book.publication_year)):
                results.append((book_id, book))
        return results

    def borrow_book(self, book_id: int, borrower: str) -> bool:
        """
        Lend a book to `borrower`.

        Succeeds only if the book exists and is available; the due date is
        `loan_days` after now. Returns False without changing anything otherwise.
        """
        book = self.find_book(book_id)
        if book is None or not book.available:
            logger.debug("Borrow rejected for %s by %s", book_id, borrower)
            return False

        book.available = False
        book.due_date = self._clock() + datetime.timedelta(days=self.loan_days)
        self.borrowed_books.setdefault(borrower, []).append(book_id)
        logger.info("Borrowed %d to %s until %s", book_id, borrower, book.due_date.isoformat())
        return True

    def return_book(self, book_id: int, borrower: str) -> bool:
        """
        Mark a lent book as returned.

        Succeeds only if the book exists and is currently on loan. Every
        occurrence of the id is dropped from `borrower`'s loan list; the name
        is not checked against whoever actually borrowed it.
        """
        book = self.find_book(book_id)
        if book is None or book.available:
            logger.debug("Return rejected for %s by %s", book_id, borrower)
            return False

        book.available = True
        loans = self.borrowed_books.get(borrower)
        if loans is not None:
            loans[:] = [loaned for loaned in loans if loaned != book_id]
        logger.info("Book %d returned by %s", book_id, borrower)
        return True

    def list_borrowed(self, borrower: str) -> List[Tuple[int, Book]]:
        """
        Books currently on loan to `borrower`, skipping ids that were removed.
        """
        results = []
        for book_id in self.borrowed_books.get(borrower, []):
            book = self.find_book(book_id)
            if book is not None:
                results.append((book_id, book))
        return results

    # ---------------- Reports ----------------
    def borrowers_with_loans(self) -> List[Dict]:
        """
        Return borrowers who currently hold one or more books still in the catalog.

        Each entry contains the borrower name and the list of borrowed book ids.
        """
        borrowers = []
        for borrower in self.borrowed_books:
            held = [book_id for book_id, _ in self.list_borrowed(borrower)]
            if held:
                borrowers.append({"Borrower": borrower, "BorrowedBooks": held})
        return borrowers

    def export_report_books(self) -> pd.DataFrame:
        """
        Produce a DataFrame suitable for reporting the books inventory.

        Availability is rendered as "Available"/"Issued"; Due Date is blank for
        books on the shelf. Overdue is judged against the catalog clock.
        """
        rows = []
        now = self._clock()
        for book_id, book in self.books.items():
            rows.append({
                "Book ID": book_id,
                "Title": book.title,
                "Author": book.author,
                "ISBN": book.isbn,
                "Publication Year": book.publication_year,
                "Availability": "Available" if book.available else "Issued",
                "Due Date": "" if book.available or book.due_date is None else format_due_date(book.due_date),
                "Overdue": book.is_overdue(now),
            })
        return pd.DataFrame(rows, columns=BOOK_REPORT_COLUMNS)

    def export_report_borrowers(self) -> pd.DataFrame:
        """
        Build a DataFrame summarizing borrowers and their current loans.

        Returns columns: Borrower, BorrowedCount, BorrowedBooks (comma separated).
        """
        rows = []
        for entry in self.borrowers_with_loans():
            held = entry["BorrowedBooks"]
            rows.append({
                "Borrower": entry["Borrower"],
                "BorrowedCount": len(held),
                "BorrowedBooks": ",".join(str(book_id) for book_id in held),
            })
        return pd.DataFrame(rows, columns=BORROWER_REPORT_COLUMNS)


def preload_books(catalog: Catalog) -> List[int]:
    """
    Load the preset demo books into `catalog`, returning the ids they received.
    """
    ids = [catalog.add_book(title, author, isbn, year) for title, author, isbn, year in SEED_BOOKS]
    logger.info("Preloaded %d books", len(ids))
    return ids
