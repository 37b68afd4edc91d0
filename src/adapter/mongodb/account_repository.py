"""MongoDB implementation of AccountRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import ACCOUNTS_COLLECTION_NAME
from domain.model.account import Account, Role
from domain.model.errors import DuplicateEmailError

logger = getLogger(__name__)


class MongoAccountRepository:
    def __init__(self, db: Database):
        self.collection = db[ACCOUNTS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for accounts collection.

        The unique email index is what actually prevents duplicate accounts
        under concurrent signups, so a failure to build it propagates and
        aborts startup. The created_at index is only a query aid.
        """
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_accounts_email', unique=True)
        except PyMongoError as e:
            logger.error("Failed to create unique email index", extra={"error": str(e)})
            raise

        try:
            create_index_safe(self.collection, [('created_at', -1)], 'idx_accounts_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create accounts indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> Account:
        """Convert MongoDB document to Account domain model."""
        return Account(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            password_hash=doc['password_hash'],
            role=Role(doc.get('role', Role.USER.value)),
            created_at=doc['created_at'],
        )

    def create(self, name: str, email: str, password_hash: str, role: Role = Role.USER) -> Account:
        """Insert a new account. Raises DuplicateEmailError on unique index violation."""
        account_doc = {
            '_id': uuid.uuid4().hex,
            'name': name,
            'email': email,
            'password_hash': password_hash,
            'role': Role(role).value,
            'created_at': datetime.now(timezone.utc),
        }
        try:
            self.collection.insert_one(account_doc)
        except DuplicateKeyError as e:
            logger.info("Account creation rejected: email already exists", extra={"email": email})
            raise DuplicateEmailError(email) from e
        except PyMongoError as e:
            logger.error("Failed to create account", extra={"email": email, "error": str(e)})
            raise

        logger.info("Account created", extra={"accountId": account_doc['_id'], "email": email})
        return self._to_domain(account_doc)

    def find_by_email(self, email: str) -> Account | None:
        """Find an account by email. Return Account or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get account by email", extra={"email": email, "error": str(e)})
            raise
        if doc:
            return self._to_domain(doc)
        return None
