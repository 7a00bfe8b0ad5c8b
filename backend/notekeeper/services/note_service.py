import logging
from typing import List

from notekeeper.core.exceptions import InvalidInput, NotFound
from notekeeper.core.models import Category, Item
from notekeeper.repositories.note_repository import NoteRepository

logger = logging.getLogger(__name__)


class NoteService:
    """Категории и пункты заметок одного владельца"""

    def __init__(self, notes: NoteRepository):
        self.notes = notes

    def list_categories(self, owner_id: str) -> List[Category]:
        return self.notes.list_by_owner(owner_id)

    def create_category(self, owner_id: str, title) -> Category:
        title = title.strip() if isinstance(title, str) else ""
        if not title:
            logger.warning("⚠️ Категория без названия (owner_id=%s)", owner_id)
            raise InvalidInput("Укажите название категории")

        category = self.notes.create_category(owner_id, title)
        logger.info(f"Категория создана: {category.id}")
        return category

    def add_item(self, owner_id: str, category_id: str, text) -> Item:
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            raise InvalidInput("Пустая заметка")

        category = self.notes.get_category(category_id)
        # Чужая категория выглядит так же, как несуществующая
        if category is None or category.owner_id != owner_id:
            logger.warning("⚠️ Категория не найдена: %s", category_id)
            raise NotFound("Категория не найдена")

        return self.notes.add_item(category, text)
