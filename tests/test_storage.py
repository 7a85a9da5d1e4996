from __future__ import annotations

import json
from dataclasses import replace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from module_book import main as main_module
from module_book.config import SETTINGS
from module_book.domain.book import ModuleBook
from module_book.domain.exceptions import DataConversionError, InvalidValue
from module_book.domain.sample import sample_book
from module_book.infra.codec import encode
from module_book.infra.db import Base
from module_book.infra.json_storage import JsonTaskStorage
from module_book.infra.repository import TaskRepository
from module_book.main import load_initial_book
from module_book.services.task_service import TaskService


@pytest.fixture
def repo() -> TaskRepository:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return TaskRepository(sessionmaker(bind=engine, autoflush=False, autocommit=False))


def test_repository_round_trips_book_in_order(repo, make_task) -> None:
    service = TaskService(ModuleBook())
    service.add_task(make_task(recurrence="weekly", tags=("exam", "highPriority")))
    service.add_task(make_task(name="Essay", module="GEA1000", tags=()))

    repo.save_book(service.book)
    loaded = repo.load_book()

    assert loaded.tasks == service.book.tasks
    assert repo.count() == len(service.book)


def test_repository_save_replaces_previous_rows(repo, make_task) -> None:
    repo.save_book(sample_book())
    repo.save_book(ModuleBook([make_task()]))

    assert repo.count() == 1
    assert repo.load_records() == [encode(make_task())]


def test_repository_surfaces_malformed_rows(repo, make_task) -> None:
    record = encode(make_task())
    record["workload"] = "7"
    repo.save_records([record])

    with pytest.raises(InvalidValue):
        repo.load_book()


def test_initial_book_falls_back_to_samples_then_empty(repo, make_task) -> None:
    book, seeded = load_initial_book(repo)
    assert book.tasks == sample_book().tasks
    assert seeded

    record = encode(make_task())
    record["deadline"] = "tomorrow"
    repo.save_records([record])
    book, seeded = load_initial_book(repo)
    assert len(book) == 0
    assert not seeded


def test_initial_book_imports_json_into_empty_database(repo, tmp_path, make_task) -> None:
    storage = JsonTaskStorage(tmp_path / "import.json")
    storage.save_book(ModuleBook([make_task(name="Essay")]))

    book, seeded = load_initial_book(repo, storage)

    assert seeded
    assert [task.name.value for task in book] == ["Essay"]


def test_initial_book_ignores_unreadable_import(repo, tmp_path) -> None:
    path = tmp_path / "import.json"
    path.write_text("{not json", encoding="utf-8")

    book, seeded = load_initial_book(repo, JsonTaskStorage(path))

    assert len(book) == 0
    assert not seeded


@pytest.fixture
def boot(monkeypatch, repo):
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)
    monkeypatch.setattr(main_module, "init_db", lambda: None)
    monkeypatch.setattr(main_module, "TaskRepository", lambda: repo)

    def run(export_path=None):
        monkeypatch.setattr(main_module, "SETTINGS", replace(SETTINGS, export_path=export_path))
        main_module.main()

    return run


def test_boot_keeps_rows_it_cannot_read(boot, repo, tmp_path, make_task) -> None:
    good = encode(make_task())
    bad = encode(make_task(name="Essay"))
    bad["workload"] = "7"
    repo.save_records([good, bad])
    export = tmp_path / "export.json"
    export.write_text(json.dumps({"tasks": [good]}), encoding="utf-8")

    boot(str(export))

    assert repo.load_records() == [good, bad]
    assert json.loads(export.read_text(encoding="utf-8")) == {"tasks": [good]}


def test_boot_seeds_empty_database_with_samples(boot, repo) -> None:
    boot()

    assert repo.load_book().tasks == sample_book().tasks


def test_boot_exports_loaded_book(boot, repo, tmp_path, make_task) -> None:
    repo.save_book(ModuleBook([make_task()]))
    export = tmp_path / "export.json"

    boot(str(export))

    assert JsonTaskStorage(export).read_book().tasks == (make_task(),)
    assert repo.count() == 1


def test_json_storage_round_trip(tmp_path, make_task) -> None:
    storage = JsonTaskStorage(tmp_path / "data" / "modulebook.json")
    book = ModuleBook([make_task(recurrence="daily"), make_task(name="Essay", tags=())])

    storage.save_book(book)

    assert storage.read_book().tasks == book.tasks
    data = json.loads(storage.path.read_text(encoding="utf-8"))
    assert data["tasks"][1]["recurrence"] == ""


def test_json_storage_missing_file(tmp_path) -> None:
    assert JsonTaskStorage(tmp_path / "absent.json").read_book() is None


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"items": []}),
        json.dumps({"tasks": [{"name": "Midterm"}]}),
        json.dumps({"tasks": ["oops"]}),
        json.dumps({"tasks": [None]}),
        json.dumps(
            {
                "tasks": [
                    {
                        "name": "Midterm",
                        "deadline": "2021-03-07 08:30",
                        "module": "CS3243",
                        "description": "Not include CSP.",
                        "workload": "3",
                        "doneStatus": "false",
                        "tagged": 5,
                    }
                ]
            }
        ),
    ],
)
def test_json_storage_rejects_bad_data(tmp_path, content) -> None:
    path = tmp_path / "modulebook.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(DataConversionError):
        JsonTaskStorage(path).read_book()
