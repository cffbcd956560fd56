"""Telegram bot message templates and constants.

Contains all user-facing texts in Ukrainian for both the video sticker bot
and the voice clip bot. Centralizes message management for consistent
replies across handlers.
"""

# Video sticker bot
VIDEO_START_MESSAGE = (
    "Привіт! Я - бот форматувальщик відео для стикерів тг\n"
    "Використання: надішли мені відео, яке хочеш зробити стікером, і я відформатую файл "
    "як треба, а потім просто перешли його в стікербот"
)
VIDEO_FILE_NOT_FOUND = "Файл не знайдено."
VIDEO_PROCESSING = "Дякую! Триває обробка файлу..."
VIDEO_ERROR = "Виникла помилка :("
VIDEO_DONE = "Готово! Надішліть наступний файл"

# Callback queries
CALLBACK_ANSWER = "Ви обрали {data}"
CALLBACK_NOTICE = "Юзер {username} клікнув на {data}"

# Voice clip bot
VOICE_START_MESSAGE = (
    "Привіт! Я зберігаю короткі голосові під командами.\n\n"
    "/add назва - зберегти наступне голосове під командою /назва\n"
    "/list - усі збережені голосові\n"
    "/delete назва - видалити голосове\n"
    "/cancel - скасувати збереження\n\n"
    "Щоб почути голосове, надішли /назва або просто назву."
)
VOICE_ADD_USAGE = "Використання: /add назва (латиниця, цифри або _, до 32 символів)"
VOICE_INVALID_NAME = "Назва «{name}» не підходить. Латиниця, цифри або _, до 32 символів."
VOICE_NAME_TAKEN = "Команда /{name} вже існує. Спершу видали її: /delete {name}"
VOICE_SEND_NOW = "Надішли голосове, яке збережу як /{name}"
VOICE_TOO_LONG = "Голосове задовге ({duration} с). Максимум {limit} с, спробуй ще раз."
VOICE_SAVED = "Збережено! Тепер /{name} відтворює це голосове."
VOICE_SAVE_ERROR = "Не вдалося зберегти голосове :("
VOICE_NO_PENDING = "Спершу вкажи назву: /add назва"
VOICE_CANCELLED = "Збереження /{name} скасовано."
VOICE_NOTHING_TO_CANCEL = "Нема чого скасовувати."
VOICE_LIST_HEADER = "Збережені голосові:"
VOICE_LIST_EMPTY = "Поки що нічого не збережено. Почни з /add назва"
VOICE_DELETE_USAGE = "Використання: /delete назва"
VOICE_DELETED = "Голосове /{name} видалено."
VOICE_NOT_FOUND = "Голосового /{name} не знайдено."
VOICE_SEND_ERROR = "Не вдалося надіслати голосове :("

# Command menu descriptions
COMMAND_START = "Старт"
COMMAND_HELP = "Довідка"
COMMAND_ADD = "Зберегти голосове"
COMMAND_LIST = "Список голосових"
COMMAND_DELETE = "Видалити голосове"
COMMAND_CANCEL = "Скасувати збереження"
COMMAND_CLIP = "Голосове {name}"
