from pydantic import BaseModel


class ProfessorAssignRequest(BaseModel):
    professor_id: int
