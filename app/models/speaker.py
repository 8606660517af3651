# app/models/speaker.py
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.db.base_class import Base
from app.models.session_speaker import session_speaker_association


class Speaker(Base):
    __tablename__ = "speakers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    bio = Column(Text, nullable=True)
    web_site = Column(String(1000), nullable=True)

    # This creates the "many" side of the many-to-many relationship
    sessions = relationship(
        "Session", secondary=session_speaker_association, back_populates="speakers"
    )
