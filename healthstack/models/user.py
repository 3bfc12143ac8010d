from datetime import datetime

from healthstack.extensions import db
from healthstack.utils.dates import isoformat_utc


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        # password_hash never leaves the server
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "createdAt": isoformat_utc(self.created_at),
        }

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
