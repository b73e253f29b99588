import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from core.database import Base
from core.errors import StorageFaultError
from department.models import Department
from department.repository import SqlDepartmentRepository
from employee.models import Employee


class DepartmentRepositoryTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        TestingSession = sessionmaker(bind=self.engine, future=True)
        self.db = TestingSession()

        payroll = Department(name="Payroll")
        it = Department(name="IT")
        self.db.add_all([payroll, it])
        self.db.commit()
        self.it_id = it.id

        self.repo = SqlDepartmentRepository(self.db)

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_list_all_sorted_by_name(self):
        self.assertEqual([d.name for d in self.repo.list_all()], ["IT", "Payroll"])

    def test_get_found(self):
        self.assertEqual(self.repo.get(self.it_id).name, "IT")

    def test_get_not_found(self):
        self.assertIsNone(self.repo.get(999))

    def test_storage_fault(self):
        err = OperationalError("SELECT", {}, Exception("gone"))
        with patch.object(self.db, "scalars", side_effect=err), patch.object(self.db, "rollback") as rollback:
            with self.assertRaises(StorageFaultError):
                self.repo.list_all()
        rollback.assert_called_once()

    def test_storage_fault_on_get_rolls_back(self):
        err = OperationalError("SELECT", {}, Exception("gone"))
        with patch.object(self.db, "get", side_effect=err), patch.object(self.db, "rollback") as rollback:
            with self.assertRaises(StorageFaultError):
                self.repo.get(self.it_id)
        rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
