from datetime import datetime

from healthstack.extensions import db


class ShoppingList(db.Model):
    """Seeded alongside the demo account; no API exposes it yet."""

    __tablename__ = "shopping_lists"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    items = db.relationship("ShoppingListItem", backref="shopping_list", cascade="all, delete-orphan")


class ShoppingListItem(db.Model):
    __tablename__ = "shopping_list_items"

    id = db.Column(db.Integer, primary_key=True)
    shopping_list_id = db.Column(
        db.Integer, db.ForeignKey("shopping_lists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = db.Column(db.String(150), nullable=False)
    quantity = db.Column(db.String(50))
    category = db.Column(db.String(50))
    checked = db.Column(db.Boolean, nullable=False, default=False)
