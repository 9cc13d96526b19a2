"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from storerate.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin', 'normal' or 'store_owner'. Deleting a user cascades to
    their ratings and detaches any stores they own (enforced by the FKs).
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(60), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    address = Column(String(400), nullable=False)
    role = Column(String(32), nullable=False, default="normal", index=True)

    ratings = relationship(
        "Rating",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    stores = relationship("Store", back_populates="owner", passive_deletes=True)
