from typing import Dict, List, Any

from sqlalchemy import inspect

from database.schema import TABLES


class SchemaInspector:
    """
    Read the live structure of the food order tables using SQLAlchemy
    """

    def __init__(self, engine):
        self.inspector = inspect(engine)

    def get_tables(self) -> List[str]:
        """Get the food order tables present in the database"""
        present = set(self.inspector.get_table_names())
        return [table.name for table in TABLES if table.name in present]

    def get_table_columns(self, table_name: str) -> List[Dict[str, Any]]:
        columns = self.inspector.get_columns(table_name)
        pk_columns = self.inspector.get_pk_constraint(table_name).get("constrained_columns", [])
        return [
            {
                "name": col["name"],
                "type": str(col["type"]),
                "nullable": col["nullable"],
                "primary_key": col["name"] in pk_columns
            }
            for col in columns
        ]

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """Get complete table information"""
        pk = self.inspector.get_pk_constraint(table_name)

        foreign_keys = sorted(
            (
                {
                    "name": fk.get("name"),
                    "columns": fk["constrained_columns"],
                    "references_table": fk["referred_table"],
                    "references_columns": fk["referred_columns"]
                }
                for fk in self.inspector.get_foreign_keys(table_name)
            ),
            key=lambda fk: fk["columns"]
        )

        indexes = sorted(
            (
                {
                    "name": index["name"],
                    "columns": index["column_names"],
                    "unique": bool(index["unique"])
                }
                for index in self.inspector.get_indexes(table_name)
            ),
            key=lambda index: index["name"] or ""
        )

        unique_constraints = sorted(
            tuple(uc["column_names"])
            for uc in self.inspector.get_unique_constraints(table_name)
        )

        return {
            "table_name": table_name,
            "columns": self.get_table_columns(table_name),
            "primary_keys": pk.get("constrained_columns", []),
            "foreign_keys": foreign_keys,
            "indexes": indexes,
            "unique_constraints": unique_constraints
        }

    def snapshot(self) -> Dict[str, Any]:
        """Structural state of every table, comparable between runs"""
        return {name: self.get_table_info(name) for name in self.get_tables()}

    def describe(self) -> str:
        """Readable schema summary"""
        parts = ["DATABASE SCHEMA:"]

        for table_name, info in self.snapshot().items():
            parts.append(f"\nTable: {table_name}")
            for col in info["columns"]:
                col_info = f"  - {col['name']} ({col['type']})"
                if not col["nullable"]:
                    col_info += " NOT NULL"
                parts.append(col_info)

            if info["primary_keys"]:
                parts.append(f"  PRIMARY KEY: {', '.join(info['primary_keys'])}")

            for fk in info["foreign_keys"]:
                parts.append(
                    f"  FOREIGN KEY: {', '.join(fk['columns'])} "
                    f"REFERENCES {fk['references_table']}({', '.join(fk['references_columns'])})"
                )

            for index in info["indexes"]:
                parts.append(f"  INDEX: {index['name']} ({', '.join(index['columns'])})")

        return "\n".join(parts)
