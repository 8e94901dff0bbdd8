"""Exceptions for use in Americano Pairing"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class AmericanoPairingException(Exception):
    """Base exception for all Americano Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(AmericanoPairingException):
    """Raised when players/courts/points settings cannot produce a schedule.

    Never transient: the caller has to change the input before trying again.
    """

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class DuplicatePlayerException(ConfigurationException):
    """Raised when the player list contains the same name twice (case-insensitive)."""

    pass


class PoolSizeExceededException(ConfigurationException):
    """Raised when the player pool is too large for the exhaustive optimizer."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(AmericanoPairingException):
    """Base exception for pairing-related errors."""

    pass


class UnknownPlayerException(PairingException):
    """Raised when the diversity ledger is asked about a player it does not track."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(AmericanoPairingException):
    """Base exception for validation errors.

    Always recoverable by asking the submitter for corrected data.
    """

    pass


class InvalidScoreException(ValidationException):
    """Raised when a submitted match score breaks the scoring invariants."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


# ========== Result Exceptions ==========


class ResultException(AmericanoPairingException):
    """Base exception for result recording errors."""

    pass


class DuplicateResultException(ResultException):
    """Raised when attempting to record a result that already exists."""

    pass


class MatchNotFoundException(ResultException):
    """Raised when a requested match cannot be found."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(AmericanoPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass
