from __future__ import annotations

from typing import List

import pytest

from tdkit.waiting import Notification, NotificationCenter


def test_post_reaches_matching_subscribers_only() -> None:
    center = NotificationCenter()
    received: List[Notification] = []
    center.subscribe("a", received.append)
    center.subscribe("b", received.append)
    assert center.post("a", {"count": 24}) == 1
    assert received == [Notification(name="a", payload={"count": 24})]


def test_unsubscribe_stops_delivery() -> None:
    center = NotificationCenter()
    received: List[Notification] = []
    subscription = center.subscribe("a", received.append)
    assert center.unsubscribe(subscription) is True
    assert center.unsubscribe(subscription) is False
    assert center.post("a") == 0
    assert received == []


def test_callback_may_unsubscribe_during_post() -> None:
    center = NotificationCenter()
    calls: List[str] = []

    def once(notification: Notification) -> None:
        calls.append(notification.name)
        center.unsubscribe(subscription)

    subscription = center.subscribe("a", once)
    center.post("a")
    center.post("a")
    assert calls == ["a"]


def test_empty_name_rejected() -> None:
    with pytest.raises(ValueError):
        NotificationCenter().subscribe("", lambda _: None)


def test_raising_subscriber_does_not_block_others(caplog) -> None:
    center = NotificationCenter()
    received: List[Notification] = []

    def broken(notification: Notification) -> None:
        raise RuntimeError("listener broke")

    center.subscribe("a", broken)
    center.subscribe("a", received.append)
    assert center.post("a") == 2
    assert [notification.name for notification in received] == ["a"]
    assert any("raised" in record.getMessage() for record in caplog.records if record.levelname == "ERROR")
