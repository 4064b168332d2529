from tests.factories.user import User, UserFactory, UserRecord, UserRecordFactory

__all__ = ["User", "UserFactory", "UserRecord", "UserRecordFactory"]
