from models import db
from sqlalchemy.orm import relationship

class Enrolment(db.Model):
    __tablename__ = 'enrolments'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    course_id = db.Column(db.Integer, db.ForeignKey('courses.id'), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    enrolled_at = db.Column(db.DateTime, default=db.func.now(), nullable=False)
    completed_at = db.Column(db.DateTime, nullable=True)

    student = db.relationship("User", backref="enrolments")
    course = relationship("Course", back_populates="enrolments")

    __table_args__ = (
        db.UniqueConstraint("student_id", "course_id", name="unique_student_course"),
    )

    def __repr__(self):
        return f"<Enrolment Student {self.student_id} Course {self.course_id}>"

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "course_id": self.course_id,
            "is_active": self.is_active,
            "enrolled_at": self.enrolled_at.isoformat() if self.enrolled_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
