from sqlalchemy import create_engine, Column, Integer, String, DateTime, LargeBinary
from sqlalchemy.orm import declarative_base, sessionmaker
from datetime import datetime
from config.settings import DATABASE_URL
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()

class FollowerBaseline(Base):
    __tablename__ = 'follower_baselines'
    id = Column(Integer, primary_key=True, autoincrement=True)
    account_key = Column(String(255), unique=True, nullable=False) # Names the tracked account
    blob = Column(LargeBinary, nullable=False, default=b'') # MessagePack array of usernames
    followers_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<FollowerBaseline(key={self.account_key}, followers={self.followers_count}, bytes={len(self.blob or b"")})>'

engine = create_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
    logger.info('Database tables created/updated.')
