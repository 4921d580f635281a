from sqlalchemy import Column, String, Text

from app.core.database import Base, UTCDateTime


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(Text, nullable=False)
    school = Column(Text, nullable=False)
    phone_number = Column(String(50), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False)
