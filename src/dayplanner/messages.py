from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Messages:
    greeting: str
    task_prompt: str
    time_prompt: str
    error: str
    invalid_time: str
    saved: str
    title: str
    time_label: str
    task_label: str


BANNER = "=" * 36
RULE = "-" * 26 + "\n"

EN = Messages(
    greeting="Hello!",
    task_prompt="What are you planning to do?: ",
    time_prompt="At what time (e.g. 9:30): ",
    error="Error",
    invalid_time="Invalid time.",
    saved="Saved",
    title="My schedule:",
    time_label="Time",
    task_label="Task",
)

RU = Messages(
    greeting="Привет!",
    task_prompt="Что планируешь делать?: ",
    time_prompt="Во сколько (пример 9:30): ",
    error="Ошибка",
    invalid_time="Неверное время.",
    saved="Сохранено",
    title="Мое расписание:",
    time_label="Время",
    task_label="Задача",
)

LANGUAGES: dict[str, Messages] = {"en": EN, "ru": RU}


def get_messages(lang: str | None) -> Messages:
    return LANGUAGES.get((lang or "en").lower(), EN)
