# models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Boolean, ForeignKey, Text, JSON, Enum as SAEnum, func, true, false
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship
from db import Base
from enums import UserRole, JobType, ApplicationStatus, NotificationType, enum_values

# text[] on postgres, JSON everywhere else (sqlite in tests)
StringList = JSON().with_variant(ARRAY(Text), "postgresql")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # hashed by the auth collaborator
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    role = Column(SAEnum(UserRole, name="user_role", values_callable=enum_values), nullable=False)

    # Student profile
    department = Column(String, nullable=True)
    roll_number = Column(String, nullable=True)
    cgpa = Column(String, nullable=True)
    skills = Column(StringList, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    jobs = relationship("Job", back_populates="poster")
    applications = relationship("Application", back_populates="student")
    resumes = relationship("Resume", back_populates="student")
    saved_jobs = relationship("SavedJob", back_populates="student")
    notifications = relationship("Notification", back_populates="user")

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False)
    type = Column(SAEnum(JobType, name="job_type", values_callable=enum_values), nullable=False)
    experience = Column(String, nullable=True)
    salary = Column(String, nullable=True)
    description = Column(Text, nullable=False)
    requirements = Column(StringList, nullable=True)
    skills = Column(StringList, nullable=True)
    eligibility = Column(Text, nullable=True)
    deadline = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, default=True, server_default=true())
    posted_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    poster = relationship("User", back_populates="jobs")
    applications = relationship("Application", back_populates="job")
    saved_by = relationship("SavedJob", back_populates="job")

    def __repr__(self):
        return f"<Job {self.id}: {self.title} @ {self.company}>"


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False, index=True)
    resume_id = Column(Integer, ForeignKey("resumes.id"), nullable=True)
    cover_letter = Column(Text, nullable=True)
    motivation = Column(Text, nullable=True)
    status = Column(
        SAEnum(ApplicationStatus, name="application_status", values_callable=enum_values),
        default=ApplicationStatus.pending,
        server_default=ApplicationStatus.pending.value,
        nullable=False,
    )
    rejection_reason = Column(Text, nullable=True)
    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    student = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")
    resume = relationship("Resume", back_populates="applications")

    def __repr__(self):
        return f"<Application {self.id}: job={self.job_id} student={self.student_id} [{self.status}]>"


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    file_name = Column(String, nullable=False)
    file_path = Column(String, nullable=False)
    # "one default per student" is left to the writer, there is no constraint for it
    is_default = Column(Boolean, default=False, server_default=false())
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    student = relationship("User", back_populates="resumes")
    applications = relationship("Application", back_populates="resume")

    def __repr__(self):
        return f"<Resume {self.id}: {self.file_name} student={self.student_id}>"


class SavedJob(Base):
    __tablename__ = "saved_jobs"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False, index=True)
    saved_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    student = relationship("User", back_populates="saved_jobs")
    job = relationship("Job", back_populates="saved_by")

    def __repr__(self):
        return f"<SavedJob {self.id}: job={self.job_id} student={self.student_id}>"


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(SAEnum(NotificationType, name="notification_type", values_callable=enum_values), nullable=False)
    is_read = Column(Boolean, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="notifications")

    def __repr__(self):
        return f"<Notification {self.id}: {self.title}>"
