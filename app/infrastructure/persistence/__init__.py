"""SQLAlchemy persistence: engine, ORM models, repositories."""
