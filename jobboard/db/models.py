from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class User(Base):
    """ An employer account. Owns job posts. """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(50))

    posts = relationship("Post", back_populates="owner")


class Applicant(Base):
    __tablename__ = "applicants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(50))
    city = Column(String(120))
    resume_url = Column(String(500))

    applications = relationship("Application", back_populates="applicant")


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    company_name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    employment_type = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    posted_date = Column(Date, nullable=False)
    # Bounds are independent; min <= max is not checked anywhere
    salary_min = Column(Numeric(12, 2, asdecimal=False))
    salary_max = Column(Numeric(12, 2, asdecimal=False))
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    owner = relationship("User", back_populates="posts")
    applications = relationship("Application", back_populates="post")


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        # Backstop for two submissions racing past the duplicate pre-check
        UniqueConstraint("applicant_id", "post_id", name="uq_application_applicant_post"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    applicant_id = Column(Integer, ForeignKey("applicants.id"), nullable=False, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    message = Column(Text)
    applied_at = Column(DateTime, nullable=False, server_default=func.now())

    applicant = relationship("Applicant", back_populates="applications")
    post = relationship("Post", back_populates="applications")
