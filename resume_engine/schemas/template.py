from __future__ import annotations

from pydantic import Field

from .draft import CamelModel, Education, Experience, PersonalInfo, Project, Skill

DEFAULT_PLACEHOLDERS: dict[str, list[str]] = {
    "full_name": ["John Doe", "Dustin Dinsmore", "Jane Smith", "Your Name"],
    "email": ["john.doe@email.com", "email@example.com", "your.email@example.com"],
    "phone": ["(555) 123-4567", "555-123-4567", "123-456-7890", "(123) 456-7890"],
    "location": ["Your City, State", "City, State", "San Francisco, CA"],
    "website": ["johndoe.com", "yourwebsite.com", "example.com", "portfolio.com"],
    "linkedin": ["linkedin.com/in/johndoe", "linkedin.com/in/yourprofile"],
    "github": ["github.com/johndoe", "github.com/username"],
}


def default_placeholders() -> dict[str, list[str]]:
    return {name: list(values) for name, values in DEFAULT_PLACEHOLDERS.items()}


class TemplateSettings(CamelModel):
    template: str = "modern"
    color_scheme: str = "blue"
    font_size: str = "medium"
    spacing: str = "normal"
    show_profile_image: bool = False
    section_order: list[str] = Field(default_factory=lambda: ["experience", "education", "skills"])


class StarterSettings(CamelModel):
    layout: str | None = None
    mode: str | None = None


class StarterData(CamelModel):
    personal_info: PersonalInfo | None = None
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    settings: StarterSettings | None = None


class Template(CamelModel):
    id: str = ""
    name: str = ""
    settings: TemplateSettings = Field(default_factory=TemplateSettings)
    starter_data: StarterData | None = None
    # Known example values per personal-info field; never copied into a draft.
    placeholders: dict[str, list[str]] = Field(default_factory=default_placeholders)

    def placeholders_for(self, field_name: str) -> list[str]:
        return self.placeholders.get(field_name, [])
