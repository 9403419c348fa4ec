from datetime import datetime

from tasker import db


class Task(db.Model):
    __tablename__ = 'task'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    created_by_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    # Many tasks to one user; no backref, use User.tasks_query() for the reverse side
    created_by = db.relationship('User')

    def __repr__(self):
        return f'<Task {self.id}: {self.title[:30]}>'
