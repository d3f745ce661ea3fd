from models import db
from classes.validators import validate_length

USER_ROLES = ("student", "teacher", "admin")


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), nullable=False, unique=True)
    email = db.Column(db.String(100), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    full_name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(20), nullable=False)  # 'student', 'teacher', 'admin'
    date_created = db.Column(db.DateTime, default=db.func.now(), nullable=False)

    courses = db.relationship("Course", back_populates="teacher")

    def __init__(self, **kwargs):
        validate_length("username", kwargs.get("username", ""), 50)
        if kwargs.get("role") not in USER_ROLES:
            raise ValueError(f"Role must be one of {', '.join(USER_ROLES)}.")
        super().__init__(**kwargs)

    @property
    def is_student(self):
        return self.role == "student"

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
