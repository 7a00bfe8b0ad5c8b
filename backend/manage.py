"""
Управление проектом - CLI команды.

Использование:
    python manage.py check-db
    python manage.py reset-db
    python manage.py seed-db
    python manage.py create-tables
"""

import argparse

from notekeeper import config
from notekeeper.core.database import Base, SessionLocal, engine, init_db
from notekeeper.core.exceptions import DuplicateUsername
from notekeeper.core.models import Category, User
from notekeeper.core.security import CredentialHasher, SessionIssuer
from notekeeper.repositories.note_repository import NoteRepository
from notekeeper.repositories.user_repository import UserRepository
from notekeeper.services.session_service import SessionService


def check_db():
    """Проверка базы данных - показать всех пользователей"""
    db = SessionLocal()

    try:
        users = db.query(User).all()

        print(f"\n📊 Всего пользователей в БД: {len(users)}\n")
        print("=" * 60)

        if not users:
            print("⚠️  База данных пустая.")
            print("   Зарегистрируйте пользователя через /api/sessions/register\n")
            return

        for user in users:
            categories = db.query(Category).filter(Category.owner_id == user.id).count()
            print(f"ID: {user.id}")
            print(f"Username: {user.username}")
            print(f"Порядок категорий: {user.order_categories}")
            print(f"Категорий: {categories}")
            print(f"Создан: {user.created_at}")
            print("-" * 60)

    finally:
        db.close()


def reset_db():
    """Сброс базы данных (удалить все таблицы и создать заново)"""
    print("⚠️  ВНИМАНИЕ: Это удалит все данные из БД!")
    confirm = input("Продолжить? (yes/no): ")

    if confirm.lower() != "yes":
        print("❌ Отменено")
        return

    Base.metadata.drop_all(bind=engine)
    init_db()
    print("✅ База данных сброшена\n")


def seed_db():
    """Заполнить БД тестовыми пользователями"""
    if not config.SECRET_KEY:
        print("❌ SECRET_KEY не задан, заполнение отменено\n")
        return

    init_db()
    db = SessionLocal()

    test_users = [
        {"username": "user1", "password": "password123"},
        {"username": "user2", "password": "password123"},
        {"username": "admin", "password": "admin12345"},
    ]

    # Токены тут не выпускаются, но сервис собирается так же, как в API
    service = SessionService(
        UserRepository(db),
        NoteRepository(db),
        CredentialHasher(config.PASSWORD_SCHEMES),
        SessionIssuer(config.SECRET_KEY),
    )

    try:
        for user_data in test_users:
            try:
                service.register(user_data["username"], user_data["password"])
            except DuplicateUsername:
                print(f"⚠️  Пользователь {user_data['username']} уже существует")
                continue
            print(f"✅ Создан пользователь: {user_data['username']}")
    finally:
        db.close()

    print(f"\n✅ Тестовые данные добавлены\n")


def create_tables():
    """Создать таблицы в БД (если их нет)"""
    init_db()
    print("✅ Таблицы созданы\n")


def main(argv=None):
    """Главная функция - обработка команд"""
    parser = argparse.ArgumentParser(
        description="Управление проектом Notekeeper API"
    )

    parser.add_argument(
        "command",
        choices=["check-db", "reset-db", "seed-db", "create-tables"],
        help="Команда для выполнения"
    )

    args = parser.parse_args(argv)

    # Выполнение команды
    commands = {
        "check-db": check_db,
        "reset-db": reset_db,
        "seed-db": seed_db,
        "create-tables": create_tables,
    }

    commands[args.command]()


if __name__ == "__main__":
    main()
