"""
Study Entity - Cursos, libros y temas de estudio.
"""

from app.domain.entities.base import EntityModel, OptionalDate, OptionalStr, Percentage, RequiredStr


class StudyInput(EntityModel):
    """Payload validado de un estudio."""

    title: RequiredStr
    description: OptionalStr = ""
    category: RequiredStr
    progress: Percentage = 0  # 0-100
    start_date: OptionalDate = ""
    end_date: OptionalDate = ""
    notes: OptionalStr = ""


class Study(StudyInput):
    """Entidad de Estudio."""

    id: str
