from typing import Dict, List, Optional


class SalonError(Exception):
    """Erro de domínio; os handlers em main.py traduzem para HTTP."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(SalonError):
    status_code = 400

    def __init__(self, detail: str = "Dados inválidos", errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(detail)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, errors=[{"field": field, "message": message}])


class NotFound(SalonError):
    status_code = 404


class InvalidTransition(SalonError):
    status_code = 409

    def __init__(self, current: str, requested: str):
        super().__init__(f"Transição de status inválida: {current} -> {requested}")
        self.current = current
        self.requested = requested


class SchedulingConflict(SalonError):
    status_code = 409

    def __init__(self, detail: str, conflicting_ids: Optional[List[int]] = None):
        super().__init__(detail)
        self.conflicting_ids = conflicting_ids or []
