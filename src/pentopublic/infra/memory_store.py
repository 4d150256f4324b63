"""In-memory backing store for the stand-in API.

Holds books, users and issued tokens for one app instance. FastAPI runs sync
endpoints in a threadpool, so services take ``store.lock`` around mutations.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum


class BookStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class BookRecord:
    id: int
    title: str
    author_id: int
    description: str | None = None
    category: str | None = None
    status: BookStatus = BookStatus.PENDING
    submitted_date: datetime | None = None
    upload_date: datetime | None = None
    is_free: bool = False
    price: float | None = None
    rating: float = 0.0
    front_page_link: str | None = None
    pdf_path: str | None = None
    audio_path: str | None = None


@dataclass
class UserRecord:
    id: int
    user_name: str
    password: str
    role: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool = True
    subscribed: bool = False

    @property
    def name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip() or self.user_name


@dataclass
class PlatformStore:
    books: dict[int, BookRecord] = field(default_factory=dict)
    users: dict[int, UserRecord] = field(default_factory=dict)
    tokens: dict[str, int] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def next_user_id(self) -> int:
        return max(self.users, default=0) + 1

    def user_by_name(self, user_name: str) -> UserRecord | None:
        for user in self.users.values():
            if user.user_name == user_name:
                return user
        return None


def seed_store(admin_user: str = "admin", admin_password: str = "admin") -> PlatformStore:
    """A small, deterministic platform: 10 books (6 approved, 3 pending, 1 rejected)."""
    store = PlatformStore()
    users = [
        UserRecord(1, admin_user, admin_password, "admin", "admin@pentopublic.dev", "Site", "Admin"),
        UserRecord(2, "ngaiman", "writer", "writer", "neil@example.com", "Neil", "Gaiman"),
        UserRecord(3, "okafor", "writer", "writer", "nnedi@example.com", "Nnedi", "Okorafor"),
        UserRecord(4, "ursula", "writer", "writer", "ursula@example.com", "Ursula", "Le Guin", is_active=False),
        UserRecord(5, "reader1", "reader", "reader", "ana@example.com", "Ana", "Lopez", subscribed=True),
        UserRecord(6, "reader2", "reader", "reader", "ben@example.com", "Ben", "Ito"),
        UserRecord(7, "reader3", "reader", "reader", "cara@example.com", "Cara", "Novak", subscribed=True),
    ]
    store.users = {u.id: u for u in users}

    base = datetime(2025, 3, 1, tzinfo=timezone.utc)
    drive = "https://drive.google.com/file/d/{}/view?usp=sharing"
    books = [
        BookRecord(1, "The Ocean Ledger", 2, "A coastal mystery.", "Mystery", BookStatus.APPROVED,
                   upload_date=base, price=4.99, rating=4.6, pdf_path=drive.format("ocean")),
        BookRecord(2, "Binti Rising", 3, "Space-faring coming of age.", "Science Fiction", BookStatus.APPROVED,
                   upload_date=base + timedelta(days=3), is_free=True, price=0, rating=4.8,
                   audio_path="https://cdn.pentopublic.dev/audio/binti.mp3"),
        BookRecord(3, "Lathe Notes", 4, None, "Fantasy", BookStatus.APPROVED,
                   upload_date=base + timedelta(days=9), price=2.5, rating=3.9),
        BookRecord(4, "Quiet Harbours", 2, "Short stories.", "Literary", BookStatus.APPROVED,
                   upload_date=base + timedelta(days=12), price=0, rating=4.1),
        BookRecord(5, "Night Market", 3, None, "Fantasy", BookStatus.APPROVED,
                   upload_date=base + timedelta(days=20), price=6.0, rating=4.4,
                   audio_path="https://cdn.pentopublic.dev/audio/night-market.mp3"),
        BookRecord(6, "Field Guide to Clouds", 4, "Illustrated.", "Non-fiction", BookStatus.APPROVED,
                   price=9.0, rating=3.2),
        BookRecord(7, "Salt and Ember", 2, "A duology opener.", "Fantasy", BookStatus.PENDING,
                   submitted_date=base + timedelta(days=30)),
        BookRecord(8, "Fourth Orbit", 3, None, None, BookStatus.PENDING,
                   submitted_date=base + timedelta(days=31)),
        BookRecord(9, "Letters to Ithaca", 2, "Epistolary novel.", "Literary", BookStatus.PENDING),
        BookRecord(10, "Unsent Drafts", 4, None, "Poetry", BookStatus.REJECTED,
                   submitted_date=base + timedelta(days=2)),
    ]
    store.books = {b.id: b for b in books}
    return store
