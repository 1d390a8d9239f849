"""Unit tests for the result message ledger."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from result_messages import ResultMessage, ResultMessages


ERROR = ResultMessage(-10, "Something is wrong.")
WARNING = ResultMessage(20, "Something is questionable.")


class TestResultMessage:

    def test_negative_is_error(self):
        assert ERROR.is_error
        assert not ERROR.is_warning

    def test_positive_is_warning(self):
        assert WARNING.is_warning
        assert not WARNING.is_error

    def test_zero_is_neither(self):
        status = ResultMessage(0, "ok")
        assert not status.is_error
        assert not status.is_warning

    def test_to_dict(self):
        assert ERROR.to_dict() == {"number": -10, "text": "Something is wrong."}


class TestResultMessages:

    def test_empty(self):
        messages = ResultMessages()
        assert not messages.has_messages()
        assert not messages.has_errors()
        assert not messages.has_warnings()
        assert len(messages) == 0

    def test_first_writer_wins(self):
        messages = ResultMessages()
        messages.add(ERROR)
        messages.add_message(-10, "Other text.")
        assert len(messages) == 1
        assert messages.get(-10) == "Something is wrong."

    def test_remove_is_idempotent(self):
        messages = ResultMessages()
        messages.add(ERROR)
        messages.remove(ERROR)
        messages.remove(ERROR)
        messages.remove(-999)
        assert not messages.has(ERROR)

    def test_remove_several_by_number_or_message(self):
        messages = ResultMessages()
        messages.add(ERROR)
        messages.add(WARNING)
        messages.remove(-10, WARNING)
        assert not messages.has_messages()

    def test_counts(self):
        messages = ResultMessages()
        messages.add(ERROR)
        messages.add(WARNING)
        messages.add_message(-11, "Another error.")
        assert messages.error_count() == 2
        assert messages.warning_count() == 1
        assert messages.has_errors()
        assert messages.has_warnings()

    def test_get_absent_returns_empty_string(self):
        assert ResultMessages().get(-10) == ""

    def test_contains(self):
        messages = ResultMessages()
        messages.add(WARNING)
        assert 20 in messages
        assert WARNING in messages
        assert ERROR not in messages

    def test_messages_keep_insertion_order(self):
        messages = ResultMessages()
        messages.add(WARNING)
        messages.add(ERROR)
        assert [m.number for m in messages.messages] == [20, -10]

    def test_copy_from_keeps_existing_text(self):
        source = ResultMessages()
        source.add(ERROR)
        source.add(WARNING)
        target = ResultMessages()
        target.add_message(-10, "Target text.")
        target.copy_from(source)
        assert target.get(-10) == "Target text."
        assert target.has(WARNING)

    def test_clear(self):
        messages = ResultMessages()
        messages.add(ERROR)
        messages.clear()
        assert not messages.has_messages()

    def test_to_list(self):
        messages = ResultMessages()
        messages.add(WARNING)
        assert messages.to_list() == [{"number": 20, "text": "Something is questionable."}]
