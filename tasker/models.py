from tasker import db


class User(db.Model):
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(180), nullable=False, unique=True)

    def tasks_query(self):
        """Query for the tasks this user owns, ordered by id."""
        from tasker.tasks.models import Task
        return Task.query.filter_by(created_by_id=self.id).order_by(Task.id.asc())

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'
