# withapp/shared/errors.py
"""
Taxonomie des erreurs métier.

Chaque erreur porte un `code` stable (consommé par le front pour choisir
le message) et un message présentable. Les services lèvent ces exceptions,
main.py les traduit en réponses HTTP via un handler unique.

    ValidationFailed   → 400  entrée invalide, détectée avant tout appel au store
    Unauthorized       → 401  identifiants ou jeton invalides
    Forbidden          → 403  profil ou rôle admin requis
    NotFound           → 404  ressource absente
    Conflict           → 409  doublon (email, pseudo, vote du jour)
    ServiceUnavailable → 503  store injoignable, à retenter par l'utilisateur
"""
from typing import Optional


class WithError(Exception):
    status_code: int = 400
    default_message: str = "Requête invalide."

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.message = message or self.default_message
        super().__init__(f"{code}: {self.message}")


class ValidationFailed(WithError):
    status_code = 400
    default_message = "Entrée invalide."


class Unauthorized(WithError):
    status_code = 401
    default_message = "Authentification requise."


class Forbidden(WithError):
    status_code = 403
    default_message = "Accès refusé."


class NotFound(WithError):
    status_code = 404
    default_message = "Ressource introuvable."


class Conflict(WithError):
    status_code = 409
    default_message = "Conflit avec l'état existant."


class ServiceUnavailable(WithError):
    status_code = 503
    default_message = "Service momentanément indisponible, réessayez."
