"""
SQLAlchemy models for the user record store.
"""
from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..models import UserRecord


class Base(DeclarativeBase):
    pass


class User(Base):
    """User row; only the columns shown on answer sheets."""

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(100), default="", index=True)
    firstname: Mapped[str] = mapped_column(String(100), default="")
    lastname: Mapped[str] = mapped_column(String(100), default="")
    email: Mapped[str] = mapped_column(String(100), default="")
    idnumber: Mapped[str] = mapped_column(String(255), default="")
    institution: Mapped[str] = mapped_column(String(255), default="")
    department: Mapped[str] = mapped_column(String(255), default="")
    phone1: Mapped[str] = mapped_column(String(20), default="")
    phone2: Mapped[str] = mapped_column(String(20), default="")
    city: Mapped[str] = mapped_column(String(120), default="")
    country: Mapped[str] = mapped_column(String(2), default="")

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id,
            username=self.username or "",
            firstname=self.firstname or "",
            lastname=self.lastname or "",
            email=self.email or "",
            idnumber=self.idnumber or "",
            institution=self.institution or "",
            department=self.department or "",
            phone1=self.phone1 or "",
            phone2=self.phone2 or "",
            city=self.city or "",
            country=self.country or "",
        )
