from unittest.mock import MagicMock, patch

import pytest
from django.db import transaction

from utils.transaction_utils import atomic_with_timeout, reset_statement_timeout, set_statement_timeout


def _connection(vendor):
    connection = MagicMock()
    connection.vendor = vendor
    return connection, connection.cursor.return_value.__enter__.return_value


@pytest.mark.unit
class TestStatementTimeout:
    def test_postgres_timeout_is_set_and_reset_locally(self):
        connection, cursor = _connection("postgresql")

        with patch("utils.transaction_utils.connections", {"default": connection}):
            set_statement_timeout(2.5)
            reset_statement_timeout()

        executed = [c.args[0] for c in cursor.execute.call_args_list]
        assert executed == ["SET LOCAL statement_timeout = 2500", "SET LOCAL statement_timeout = DEFAULT"]

    def test_other_backends_run_no_statements(self):
        connection, cursor = _connection("sqlite")

        with patch("utils.transaction_utils.connections", {"default": connection}):
            set_statement_timeout(2.5)
            reset_statement_timeout()

        cursor.execute.assert_not_called()


@pytest.mark.unit
@pytest.mark.django_db
class TestAtomicWithTimeout:
    @patch("utils.transaction_utils.reset_statement_timeout")
    @patch("utils.transaction_utils.set_statement_timeout")
    def test_nested_block_resets_timeout_before_leaving(self, mock_set, mock_reset):
        with transaction.atomic():
            with atomic_with_timeout(5):
                pass
            mock_reset.assert_called_once_with(using="default")

        mock_set.assert_called_once_with(5, using="default")

    @patch("utils.transaction_utils.reset_statement_timeout")
    @patch("utils.transaction_utils.set_statement_timeout")
    def test_failed_block_leaves_reset_to_rollback(self, mock_set, mock_reset):
        with pytest.raises(ValueError):
            with atomic_with_timeout(5):
                raise ValueError("boom")

        mock_reset.assert_not_called()

    @patch("utils.transaction_utils.reset_statement_timeout")
    @patch("utils.transaction_utils.set_statement_timeout")
    def test_no_timeout_touches_nothing(self, mock_set, mock_reset):
        with atomic_with_timeout(None):
            pass

        mock_set.assert_not_called()
        mock_reset.assert_not_called()
