"""
Schema base com configuração comum.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Schema base para todos os registros da biblioteca.
    Registros são imutáveis e guardam enums como seus valores string,
    prontos para query strings e templates.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True, validate_default=True)
