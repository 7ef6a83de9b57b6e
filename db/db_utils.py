from sqlalchemy.orm import Session
from db.models import FollowerBaseline
from datetime import datetime
from typing import List, Optional

# --- Follower Baseline Operations ---
def get_baseline(db: Session, account_key: str) -> Optional[FollowerBaseline]:
    return db.query(FollowerBaseline).filter(FollowerBaseline.account_key == account_key).first()

def load_baseline_blob(db: Session, account_key: str) -> bytes:
    baseline = get_baseline(db, account_key)
    if not baseline or not baseline.blob:
        return b''
    return bytes(baseline.blob)

def save_baseline_blob(db: Session, account_key: str, blob: bytes, followers_count: int) -> FollowerBaseline:
    baseline = get_baseline(db, account_key)
    if baseline:
        baseline.blob = blob
        baseline.followers_count = followers_count
        baseline.updated_at = datetime.utcnow()
    else:
        baseline = FollowerBaseline(account_key=account_key, blob=blob, followers_count=followers_count)
        db.add(baseline)
    db.commit()
    db.refresh(baseline)
    return baseline

def delete_baseline(db: Session, account_key: str) -> bool:
    baseline = get_baseline(db, account_key)
    if baseline:
        db.delete(baseline)
        db.commit()
        return True
    return False

def list_baselines(db: Session) -> List[FollowerBaseline]:
    return db.query(FollowerBaseline).order_by(FollowerBaseline.account_key.asc()).all()
