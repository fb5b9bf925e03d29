"""
Request dependencies: services built once at startup and kept on app.state.
"""
from fastapi import Request

from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.backup import BackupService
from fittrack.services.records import RecordStore
from fittrack.services.storage import StorageAdapter


def get_storage(request: Request) -> StorageAdapter:
    return request.app.state.storage


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_calculator(request: Request) -> AnalyticsCalculator:
    return request.app.state.calculator


def get_backup_service(request: Request) -> BackupService:
    return request.app.state.backup
