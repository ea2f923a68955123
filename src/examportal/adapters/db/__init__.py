"""SQLAlchemy engine and metadata shared by SQL-backed adapters."""
