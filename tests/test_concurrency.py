import unittest

from sqlalchemy import update

from catering_server.db import SessionLocal
from catering_server.exceptions import ConflictError
from catering_server.models import Package
from catering_server.utils.transaction import write_transaction
from tests.support import ApiTestCase


class TestPackageRevision(ApiTestCase):

    def test_stale_package_write_is_a_conflict(self):
        package_id = self.create_package(dish_ids=[self.kunafa_id]).json()["id"]

        first = SessionLocal()
        second = SessionLocal()
        try:
            stale = first.query(Package).filter(Package.id == package_id).one()
            stale_revision = stale.revision

            # a competing writer bumps the revision
            second.execute(update(Package).where(Package.id == package_id)
                           .values(revision=Package.revision + 1, name="Theirs"))
            second.commit()

            with self.assertRaises(ConflictError):
                with write_transaction(first):
                    stale.name = "Mine"

            fresh = second.query(Package).filter(Package.id == package_id).one()
            second.refresh(fresh)
            self.assertEqual(fresh.name, "Theirs")
            self.assertEqual(fresh.revision, stale_revision + 1)
        finally:
            first.close()
            second.close()


if __name__ == "__main__":
    unittest.main()
