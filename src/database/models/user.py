"""User account model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.models.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from src.database.models.review import Review


class User(CreatedAtMixin, Base):
    """Registered reviewer.

    ``password_hash`` lives in the table but is never selected by the API.

    Attributes:
        user_id: Primary key.
        username: Public handle.
        email: Contact address.
        password_hash: Credential hash.
        is_active: Whether the account is enabled.
    """

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="user")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<User(user_id={self.user_id}, username='{self.username}')>"
