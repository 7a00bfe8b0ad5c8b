import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from notekeeper.core.models import Category, Item

logger = logging.getLogger(__name__)


class NoteRepository:
    """Категории заметок и их пункты, по владельцу"""

    def __init__(self, db: Session):
        self.db = db

    def list_by_owner(self, owner_id: str) -> List[Category]:
        return (
            self.db.query(Category)
            .options(selectinload(Category.items))
            .filter(Category.owner_id == owner_id)
            .order_by(Category.timestamp)
            .all()
        )

    def get_category(self, category_id: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def create_category(self, owner_id: str, title: str) -> Category:
        category = Category(owner_id=owner_id, title=title)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def add_item(self, category: Category, text: str) -> Item:
        item = Item(category_id=category.id, text=text)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_by_owner(self, owner_id: str) -> int:
        """
        Удаляет все категории пользователя вместе с пунктами.

        :param owner_id: id владельца
        :type owner_id: str
        :return: Количество удалённых категорий
        :rtype: int
        """
        category_ids = select(Category.id).where(Category.owner_id == owner_id)
        self.db.query(Item).filter(Item.category_id.in_(category_ids)).delete(
            synchronize_session=False
        )
        deleted = (
            self.db.query(Category)
            .filter(Category.owner_id == owner_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info(f"Удалено категорий: {deleted} (owner_id={owner_id})")
        return deleted
