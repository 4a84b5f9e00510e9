"""SQL-backed car repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.car import Car
from app.application.ports.car_repository import CarRepository
from app.domain.errors import CarRepositoryError
from app.domain.value_objects.engine_type import EngineType
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import CarModel


class SqlCarRepository(CarRepository):
    """SQLAlchemy implementation of car repository."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        """
        Initialize SQL repository.

        Args:
            database_url: SQLAlchemy URL (defaults to DATABASE_URL from settings)
        """
        self._database_url = database_url

    def _model_to_dto(self, model: CarModel) -> Car:
        """
        Convert CarModel to Car DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Car DTO
        """
        return Car(
            id=model.id,
            license_plate=model.license_plate,
            brand=model.brand,
            model=model.model,
            engine_type=EngineType[model.engine_type],
            registration_date=model.registration_date,
            image=model.image,
        )

    def _dto_to_model(self, car: Car, model: Optional[CarModel] = None) -> CarModel:
        """
        Convert Car DTO to CarModel (for upsert).

        Args:
            car: Car DTO
            model: Existing model instance (for update) or None (for insert)

        Returns:
            CarModel instance
        """
        if model is None:
            model = CarModel()
            if not car.is_new:
                model.id = car.id
        model.license_plate = car.license_plate
        model.brand = car.brand
        model.model = car.model
        model.engine_type = car.engine_type.name
        model.registration_date = car.registration_date
        model.image = car.image
        model.updated_at = datetime.now(timezone.utc)
        return model

    def _upsert(self, db: Session, car: Car) -> CarModel:
        model = None if car.is_new else db.get(CarModel, car.id)
        if model:
            return self._dto_to_model(car, model)
        model = self._dto_to_model(car)
        db.add(model)
        return model

    def find_all(self) -> list[Car]:
        """
        Get all cars.

        Returns:
            List of all cars
        """
        db: Session = get_db_session(self._database_url)
        try:
            models = db.query(CarModel).all()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing cars: {str(e)}")
            raise CarRepositoryError("Could not list cars") from e
        finally:
            db.close()

    def find_by_license_plate(self, license_plate: str) -> Optional[Car]:
        """
        Get the car owning a license plate.

        Args:
            license_plate: License plate to look up

        Returns:
            Car DTO, or None if not found
        """
        db: Session = get_db_session(self._database_url)
        try:
            model = (
                db.query(CarModel).filter(CarModel.license_plate == license_plate).first()
            )
            if model is None:
                return None
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting car {license_plate}: {str(e)}")
            raise CarRepositoryError(f"Could not get car {license_plate}") from e
        finally:
            db.close()

    def save(self, car: Car) -> Car:
        """
        Save a car (insert when new, upsert by id otherwise).

        Args:
            car: Car DTO to save

        Returns:
            The persisted car with its id
        """
        return self.save_all([car])[0]

    def save_all(self, cars: list[Car]) -> list[Car]:
        """
        Save several cars in one transaction.

        Args:
            cars: Car DTOs to save

        Returns:
            The persisted cars with their ids
        """
        db: Session = get_db_session(self._database_url)
        try:
            models = [self._upsert(db, car) for car in cars]
            db.commit()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving {len(cars)} car(s): {str(e)}")
            raise CarRepositoryError("Could not save cars") from e
        finally:
            db.close()

    def delete_by_id(self, car_id: int) -> None:
        """
        Delete a car by id.

        Args:
            car_id: Car identifier
        """
        db: Session = get_db_session(self._database_url)
        try:
            db.query(CarModel).filter(CarModel.id == car_id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting car {car_id}: {str(e)}")
            raise CarRepositoryError(f"Could not delete car {car_id}") from e
        finally:
            db.close()

    def delete_all(self) -> None:
        """Delete every car."""
        db: Session = get_db_session(self._database_url)
        try:
            db.query(CarModel).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting all cars: {str(e)}")
            raise CarRepositoryError("Could not delete cars") from e
        finally:
            db.close()
