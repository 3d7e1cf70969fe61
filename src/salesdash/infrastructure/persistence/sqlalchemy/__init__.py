"""SQLAlchemy persistence adapter."""
