"""Unit tests for LocalCarStorage."""

import json
import zipfile
from pathlib import Path

import pytest

from app.adapters.outbound.storage.local_car_storage import LocalCarStorage
from app.domain.errors import CarStorageError
from app.domain.value_objects.engine_type import EngineType
from conftest import make_car


def test_creates_images_dir(tmp_path: Path) -> None:
    """Test that the images directory is created on construction."""
    storage = LocalCarStorage(tmp_path / "nested" / "images")

    assert storage.images_dir.is_dir()


def test_store_json_writes_readable_records(storage: LocalCarStorage, tmp_path: Path) -> None:
    """Test the JSON layout written for cars."""
    file = tmp_path / "cars.json"
    cars = [make_car("1234BCD", EngineType.ELECTRIC, id=3, image="a.png")]

    assert storage.store_json(file, cars) == 1

    records = json.loads(file.read_text(encoding="utf-8"))
    assert records == [
        {
            "id": 3,
            "license_plate": "1234BCD",
            "brand": "Seat",
            "model": "Ibiza",
            "engine_type": "ELECTRIC",
            "registration_date": "2020-01-15",
            "image": "a.png",
        }
    ]
    assert storage.load_json(file) == cars


def test_load_json_missing_file(storage: LocalCarStorage, tmp_path: Path) -> None:
    """Test that a missing file is a storage error."""
    with pytest.raises(CarStorageError):
        storage.load_json(tmp_path / "nope.json")


def test_load_json_invalid_content(storage: LocalCarStorage, tmp_path: Path) -> None:
    """Test that malformed records are a storage error."""
    file = tmp_path / "cars.json"
    file.write_text('[{"license_plate": "1234BCD", "engine_type": "STEAM"}]', encoding="utf-8")

    with pytest.raises(CarStorageError):
        storage.load_json(file)


def test_save_update_and_delete_image(
    storage: LocalCarStorage, source_image: Path, other_source_image: Path
) -> None:
    """Test the stored image lifecycle."""
    stored = storage.save_image(source_image)

    assert stored.parent == storage.images_dir
    assert stored.name != source_image.name
    assert storage.load_image(stored.name) == stored

    updated = storage.update_image(stored, other_source_image)
    assert updated == stored
    assert stored.read_bytes() == other_source_image.read_bytes()

    storage.delete_image(stored)
    assert not stored.exists()
    storage.delete_image(stored)  # Already gone


def test_update_image_with_itself_is_noop(storage: LocalCarStorage, source_image: Path) -> None:
    """Test that replacing a stored image with the same file keeps it intact."""
    stored = storage.save_image(source_image)

    assert storage.update_image(stored, stored) == stored
    assert stored.read_bytes() == source_image.read_bytes()


def test_save_image_missing_source(storage: LocalCarStorage, tmp_path: Path) -> None:
    """Test that copying a missing file is a storage error."""
    with pytest.raises(CarStorageError):
        storage.save_image(tmp_path / "ghost.png")


@pytest.mark.parametrize("name", ["", "sin-imagen.png", "missing.jpg"])
def test_load_image_not_found(storage: LocalCarStorage, name: str) -> None:
    """Test that unknown image names are storage errors."""
    with pytest.raises(CarStorageError):
        storage.load_image(name)


def test_delete_all_images(
    storage: LocalCarStorage, source_image: Path, other_source_image: Path
) -> None:
    """Test that every stored image is removed and counted."""
    storage.save_image(source_image)
    storage.save_image(other_source_image)

    assert storage.delete_all_images() == 2
    assert list(storage.images_dir.iterdir()) == []


def test_zip_layout_and_restore(
    storage: LocalCarStorage, source_image: Path, tmp_path: Path
) -> None:
    """Test that the archive bundles cars.json and existing images only."""
    stored = storage.save_image(source_image)
    cars = [
        make_car("1234BCD", image=stored.name),
        make_car("5678FGH"),
        make_car("9012JKL", image="lost.png"),
    ]
    archive = tmp_path / "backup.zip"

    storage.export_zip(archive, cars)

    with zipfile.ZipFile(archive) as zf:
        assert sorted(zf.namelist()) == ["cars.json", f"images/{stored.name}"]

    storage.delete_all_images()
    assert storage.load_from_zip(archive) == cars
    assert stored.read_bytes() == source_image.read_bytes()


def test_load_from_zip_ignores_archive_paths(storage: LocalCarStorage, tmp_path: Path) -> None:
    """Test that image entries are extracted by base name into the images dir."""
    archive = tmp_path / "crafted.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("cars.json", "[]")
        zf.writestr("images/../../evil.png", b"x")

    assert storage.load_from_zip(archive) == []
    assert (storage.images_dir / "evil.png").exists()
    assert not (tmp_path.parent / "evil.png").exists()


def test_load_from_zip_without_data(storage: LocalCarStorage, tmp_path: Path) -> None:
    """Test that archives lacking cars.json or not being ZIPs are storage errors."""
    archive = tmp_path / "empty.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("readme.txt", "hello")
    not_a_zip = tmp_path / "cars.json"
    not_a_zip.write_text("[]", encoding="utf-8")

    with pytest.raises(CarStorageError):
        storage.load_from_zip(archive)
    with pytest.raises(CarStorageError):
        storage.load_from_zip(not_a_zip)


def test_export_zip_only_reads_from_images_dir(
    storage: LocalCarStorage, tmp_path: Path
) -> None:
    """Test that image references pointing outside the images directory are not archived."""
    (tmp_path / "outside.png").write_bytes(b"secret")
    archive = tmp_path / "backup.zip"

    storage.export_zip(archive, [make_car("1234BCD", image="../outside.png")])

    with zipfile.ZipFile(archive) as zf:
        assert zf.namelist() == ["cars.json"]
