# tests/utils.py
from typing import List, Dict, Any
from sqlalchemy import inspect, text
from sqlalchemy.orm import Session


class DBInspector:
    def __init__(self, session: Session):
        self.session = session
        self.engine = session.get_bind()
        self.inspector = inspect(self.engine)

    def get_columns(self, table_name: str) -> Dict[str, Dict[str, Any]]:
        """Column info keyed by column name"""
        return {col['name']: col for col in self.inspector.get_columns(table_name)}

    def get_all_tables(self) -> List[str]:
        """Get list of all tables in database"""
        return self.inspector.get_table_names()

    def count_rows(self, table_name: str) -> int:
        """Get row count for a table"""
        result = self.session.execute(text(f"SELECT COUNT(*) FROM {table_name}"))
        return result.scalar()

    def get_schema_sql(self, table_name: str) -> str:
        """Get CREATE TABLE SQL for a table"""
        result = self.session.execute(
            text("SELECT sql FROM sqlite_master WHERE type='table' AND name=:name"),
            {'name': table_name}
        )
        return result.scalar() or ''
