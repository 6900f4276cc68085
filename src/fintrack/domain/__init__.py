"""Domain layer for fintrack application."""

__all__ = [
    "TransactionService",
    "CategoryService",
    "SubjectService",
    "BankService",
    "RegisterService",
    "StatisticsService",
    "UserService",
    "DataSeeder",
]

_SERVICES = {
    "TransactionService": "fintrack.domain.transaction",
    "CategoryService": "fintrack.domain.category",
    "SubjectService": "fintrack.domain.subject",
    "BankService": "fintrack.domain.bank",
    "RegisterService": "fintrack.domain.register",
    "StatisticsService": "fintrack.domain.statistics",
    "UserService": "fintrack.domain.user",
    "DataSeeder": "fintrack.domain.seed",
}


# Services are imported lazily: the database layer imports domain.entities,
# and services import the database layer.
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
