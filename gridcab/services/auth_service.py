"""Authentication service for GridCab application."""

import logging

from gridcab.models.user import Passenger
from gridcab.services.state import TaxiState

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Custom exception for authentication errors."""
    pass


class AuthValidationError(AuthError):
    """Raised when a name or password is blank."""
    pass


class DuplicateNameError(AuthError):
    """Raised when registering a name that is already taken."""
    pass


class InvalidCredentialsError(AuthError):
    """Raised when no passenger matches the given name and password."""
    pass


class AuthService:
    """Service for passenger registration and login."""

    @staticmethod
    def _validate_credentials(name: str, password: str) -> None:
        """
        Reject blank names and passwords.

        Raises:
            AuthValidationError: If either value is empty or whitespace
        """
        if not name or not name.strip():
            raise AuthValidationError("Name cannot be empty.")
        if not password or not password.strip():
            raise AuthValidationError("Password cannot be empty.")

    @staticmethod
    def find_passenger_by_name(state: TaxiState, name: str):
        """Return the first passenger whose name matches ignoring case, or None."""
        return next((p for p in state.passengers.values() if p.matches_name(name)), None)

    @staticmethod
    def register_passenger(state: TaxiState, name: str, password: str) -> Passenger:
        """
        Register a new passenger.

        Args:
            state: Session state holding the passenger registry
            name: Passenger name, unique ignoring case
            password: Plaintext password

        Returns:
            Passenger: The newly registered passenger

        Raises:
            AuthValidationError: If name or password is blank
            DuplicateNameError: If the name is already registered
        """
        AuthService._validate_credentials(name, password)

        if AuthService.find_passenger_by_name(state, name) is not None:
            raise DuplicateNameError(f"A passenger with the name '{name}' already exists.")

        passenger = Passenger(id=state.next_passenger_id(), name=name, password=password)
        state.passengers[passenger.id] = passenger

        logger.info(f"Passenger {name} registered with ID: {passenger.id}")
        return passenger

    @staticmethod
    def login(state: TaxiState, name: str, password: str) -> Passenger:
        """
        Log a passenger in.

        Args:
            state: Session state holding the passenger registry
            name: Passenger name, matched ignoring case
            password: Plaintext password, matched exactly

        Returns:
            Passenger: The first passenger matching both name and password

        Raises:
            AuthValidationError: If name or password is blank
            InvalidCredentialsError: If no passenger matches
        """
        AuthService._validate_credentials(name, password)

        for passenger in state.passengers.values():
            if passenger.matches_name(name) and passenger.password == password:
                logger.info(f"Passenger {passenger.id} logged in")
                return passenger

        raise InvalidCredentialsError("Invalid name or password.")
