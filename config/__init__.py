import os

# Apelidos aceitos em APP_ENV para cada módulo de configuração
SETTINGS_BY_ENV = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    # Valor desconhecido ou ausente cai em development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return SETTINGS_BY_ENV.get(env, "config.development")
