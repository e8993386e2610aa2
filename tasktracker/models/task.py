import sqlalchemy as sa

from tasktracker.extensions import db


class Task(db.Model):
    __tablename__ = "task"
    __table_args__ = (
        db.Index("idx_task_status_created", "status", "created_at"),
        # ids are never reused, even after rows are deleted
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    # False = pending, True = completed
    status = db.Column(db.Boolean, nullable=False, default=False, server_default=sa.false())
    created_at = db.Column(db.DateTime, nullable=False, server_default=sa.func.now())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": bool(self.status),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Task {self.id} {self.title!r}>"
