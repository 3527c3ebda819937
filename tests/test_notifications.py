"""Tests for NotificationCenter."""

import pytest

from customer_hub.notifications import Notice, NotificationCenter


class TestNotificationCenter:
    """Tests for NotificationCenter."""

    def test_notify_adds_notice(self) -> None:
        center = NotificationCenter()
        notice = center.notify("Título", "Descrição")

        assert center.state == (notice,)
        assert notice.open is True
        assert notice.notice_id == "1"

    def test_limit_keeps_newest(self) -> None:
        center = NotificationCenter(limit=2)
        center.notify("a")
        second = center.notify("b")
        third = center.notify("c")

        assert center.state == (third, second)

    def test_ids_increment_per_instance(self) -> None:
        center = NotificationCenter()
        assert [center.notify(str(i)).notice_id for i in range(3)] == ["1", "2", "3"]
        assert NotificationCenter().notify("x").notice_id == "1"

    def test_update(self) -> None:
        center = NotificationCenter()
        notice = center.notify("a")

        center.update(notice.notice_id, title="b", variant="destructive")

        assert center.state[0].title == "b"
        assert center.state[0].variant == "destructive"

    def test_dismiss_one(self) -> None:
        center = NotificationCenter(limit=2)
        first = center.notify("a")
        second = center.notify("b")

        center.dismiss(first.notice_id)

        states = {n.notice_id: n.open for n in center.state}
        assert states == {first.notice_id: False, second.notice_id: True}

    def test_dismiss_all(self) -> None:
        center = NotificationCenter(limit=3)
        center.notify("a")
        center.notify("b")

        center.dismiss()

        assert all(not n.open for n in center.state)

    def test_remove(self) -> None:
        center = NotificationCenter(limit=3)
        first = center.notify("a")
        second = center.notify("b")

        center.remove(first.notice_id)
        assert center.state == (second,)

        center.remove()
        assert center.state == ()

    def test_subscribers_receive_state(self) -> None:
        center = NotificationCenter()
        received: list[tuple[Notice, ...]] = []
        unsubscribe = center.subscribe(received.append)

        notice = center.notify("a")
        center.dismiss()
        unsubscribe()
        center.remove()

        assert received[0] == (notice,)
        assert received[1][0].open is False
        assert len(received) == 2

    def test_unsubscribe_twice_is_harmless(self) -> None:
        center = NotificationCenter()
        unsubscribe = center.subscribe(lambda state: None)
        unsubscribe()
        unsubscribe()

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError):
            NotificationCenter(limit=0)

    def test_notices_are_immutable(self) -> None:
        notice = NotificationCenter().notify("a")
        with pytest.raises(AttributeError):
            notice.title = "b"  # type: ignore[misc]
