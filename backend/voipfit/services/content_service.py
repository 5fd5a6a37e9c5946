"""Site content store: keyed JSON documents with atomic upsert."""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from voipfit.models.site_content import SiteContent


def find_content(db: Session, key: str) -> Optional[SiteContent]:
    return db.query(SiteContent).filter(SiteContent.key == key).first()


def get_content(db: Session, key: str) -> SiteContent:
    row = find_content(db, key)
    if not row:
        raise HTTPException(status_code=404, detail="Content not found")
    return row


def list_content(db: Session) -> List[SiteContent]:
    return db.query(SiteContent).order_by(SiteContent.key.asc()).all()


def _upsert_statement(dialect: str, key: str, content: Dict[str, Any]):
    if dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    elif dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect in ("mysql", "mariadb"):
        from sqlalchemy.dialects.mysql import insert

        stmt = insert(SiteContent).values(key=key, content=content)
        return stmt.on_duplicate_key_update(content=stmt.inserted.content, updated_at=func.now())
    else:
        raise RuntimeError(f"Upsert is not supported for dialect '{dialect}'")

    stmt = insert(SiteContent).values(key=key, content=content)
    return stmt.on_conflict_do_update(
        index_elements=[SiteContent.key],
        set_={"content": stmt.excluded.content, "updated_at": func.now()},
    )


def upsert_content(db: Session, key: str, content: Dict[str, Any]) -> SiteContent:
    # Single INSERT .. ON CONFLICT statement; concurrent saves never duplicate the key.
    stmt = _upsert_statement(db.get_bind().dialect.name, key, content)
    db.execute(stmt)
    db.commit()
    return get_content(db, key)
