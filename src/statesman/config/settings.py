"""Configurações do runtime via variáveis de ambiente (prefixo STATESMAN_).

A engine em si não lê configuração; Settings alimenta apenas logging e a
escolha do backend do Transition Log.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "STATESMAN_"

TRANSITION_LOG_BACKENDS: frozenset[str] = frozenset({"memory", "redis", "firestore"})


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "statesman"
    environment: str = "development"

    # Observabilidade
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # Transition Log
    transition_log_backend: str = "memory"  # memory | redis | firestore
    redis_url: str | None = None  # Para transition_log_backend=redis
    redis_key_prefix: str = "transitions"
    firestore_project_id: str | None = None  # Para transition_log_backend=firestore
    firestore_collection: str = "state_machines"

    def validate_transition_log_backend(self) -> list[str]:
        """Valida backend do histórico de transições.

        Retorna lista de erros (vazia = tudo OK). Em staging/prod, backend em
        memória é proibido: o histórico se perderia a cada restart.
        """
        errors: list[str] = []
        backend = self.transition_log_backend.lower()

        if backend not in TRANSITION_LOG_BACKENDS:
            errors.append(
                f"{ENV_PREFIX}TRANSITION_LOG_BACKEND '{backend}' inválido. "
                f"Valores válidos: {sorted(TRANSITION_LOG_BACKENDS)}"
            )

        if backend == "memory" and (self.is_staging or self.is_production):
            errors.append(
                f"{ENV_PREFIX}TRANSITION_LOG_BACKEND=memory é proibido em staging/production. "
                "Configure Redis ou Firestore para histórico persistente."
            )

        if backend == "redis" and not self.redis_url:
            errors.append(
                f"{ENV_PREFIX}TRANSITION_LOG_BACKEND=redis requer {ENV_PREFIX}REDIS_URL configurado"
            )

        if backend == "firestore" and not self.firestore_project_id:
            errors.append(
                f"{ENV_PREFIX}TRANSITION_LOG_BACKEND=firestore requer "
                f"{ENV_PREFIX}FIRESTORE_PROJECT_ID"
            )

        return errors

    def validate_logging(self) -> list[str]:
        """Valida nível e formato de log."""
        errors: list[str] = []
        if self.log_format.lower() not in {"json", "text"}:
            errors.append(f"{ENV_PREFIX}LOG_FORMAT inválido: use json | text")
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"{ENV_PREFIX}LOG_LEVEL '{self.log_level}' inválido")
        return errors

    def validate_all(self) -> list[str]:
        return self.validate_transition_log_backend() + self.validate_logging()

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_staging(self) -> bool:
        """Retorna True se ambiente é staging."""
        return self.environment.lower() in ("staging", "stage")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
