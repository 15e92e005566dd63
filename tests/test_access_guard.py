"""Unit tests for the access guard and the mutation safeguards."""

import unittest

from app.core.errors import AppErrorType, BusinessRuleError
from app.models.user import SUPER_ADMIN_ID, Role
from app.services.access_guard import authorize
from app.services.safeguards import ensure_not_self, ensure_not_super_admin


class TestAuthorize(unittest.TestCase):
    """authorize(required, caller) is True iff required is None or equals caller."""

    def test_truth_table(self) -> None:
        for required in (None, Role.ADMIN, Role.USER):
            for caller in (Role.ADMIN, Role.USER):
                with self.subTest(required=required, caller=caller):
                    expected = required is None or required == caller
                    self.assertEqual(authorize(required, caller), expected)

    def test_admin_does_not_imply_user(self) -> None:
        self.assertFalse(authorize(Role.USER, Role.ADMIN))

    def test_no_requirement_allows_any_role(self) -> None:
        self.assertTrue(authorize(None, Role.USER))
        self.assertTrue(authorize(None, Role.ADMIN))


class TestRoleParsing(unittest.TestCase):
    def test_unknown_role_name_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Role("SUPERUSER")

    def test_role_values_are_strings(self) -> None:
        self.assertEqual(Role("ADMIN"), Role.ADMIN)
        self.assertEqual(Role.USER.value, "USER")


class TestSafeguards(unittest.TestCase):
    def test_super_admin_is_immutable(self) -> None:
        with self.assertRaises(BusinessRuleError) as ctx:
            ensure_not_super_admin(SUPER_ADMIN_ID)
        self.assertIs(ctx.exception.error_type, AppErrorType.NOT_MODIFY_SUPER_ADMIN)
        self.assertEqual(ctx.exception.http_status, 400)

    def test_other_ids_pass(self) -> None:
        ensure_not_super_admin(2)
        ensure_not_super_admin(999)

    def test_self_target_is_rejected(self) -> None:
        with self.assertRaises(BusinessRuleError) as ctx:
            ensure_not_self(5, 5)
        self.assertIs(ctx.exception.error_type, AppErrorType.NOT_MODIFY_CURRENT_USER)

    def test_other_target_passes(self) -> None:
        ensure_not_self(5, 6)


if __name__ == "__main__":
    unittest.main()
