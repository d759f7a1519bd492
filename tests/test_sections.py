"""Tests for section generators, formatters and renderers."""

import pytest

from resume_builder.models.layout import SectionContent, SectionSpacing, SocialLinksLayout
from resume_builder.models.resume import (
    Certificate,
    Education,
    Experience,
    Internship,
    Language,
    Project,
    ResumeData,
    SkillItem,
    SocialLink,
    Volunteering,
)
from resume_builder.sections.formatters import (
    format_certificates_items,
    format_education_items,
    format_experience_items,
    format_projects_items,
    format_section_items,
    format_social_links,
    wrap_in_section_block,
)
from resume_builder.sections.generators import (
    compose_title,
    generate_certificates_content,
    generate_contact_content,
    generate_education_content,
    generate_experience_content,
    generate_internships_content,
    generate_languages_content,
    generate_projects_content,
    generate_skills_content,
    generate_social_links_content,
    generate_volunteering_content,
)
from resume_builder.sections.renderers import (
    SECTION_RENDERERS,
    render_experience,
    render_profile,
    render_skills,
    render_social_links,
)


class TestComposeTitle:
    def test_all_parts(self):
        assert compose_title("Engineer", "Acme", "Berlin") == "Engineer at Acme, Berlin"

    def test_no_dangling_connectors(self):
        assert compose_title("Engineer", "", "") == "Engineer"
        assert compose_title("", "Acme", "Berlin") == "Acme, Berlin"
        assert compose_title("Engineer", "  ", "Berlin") == "Engineer, Berlin"
        assert compose_title("", "", "Berlin") == "Berlin"
        assert compose_title(None, None, None) == ""

    def test_custom_connector(self):
        assert compose_title("AWS", "Amazon", connector=" from ") == "AWS from Amazon"

    def test_parts_escaped(self):
        assert compose_title("C# Dev", "Acme") == "C\\# Dev at Acme"


def blank_record(record_cls):
    """A record whose every text field holds only whitespace."""
    fields = {
        name: "   " for name, field in record_cls.model_fields.items() if field.annotation is str
    }
    if "achievements" in record_cls.model_fields:
        fields["achievements"] = ["   "]
    return record_cls(**fields)


def social_links_content(records):
    return generate_social_links_content(ResumeData(social_links=records))


class TestGenerators:
    def test_blank_records_dropped(self):
        contents = generate_experience_content([Experience(), Experience(position="Dev")])
        assert len(contents) == 1
        assert contents[0].title == "Dev"

    @pytest.mark.parametrize(
        "generate, record_cls",
        [
            (generate_experience_content, Experience),
            (generate_internships_content, Internship),
            (generate_education_content, Education),
            (generate_volunteering_content, Volunteering),
            (generate_projects_content, Project),
            (generate_skills_content, SkillItem),
            (generate_languages_content, Language),
            (generate_certificates_content, Certificate),
            (social_links_content, SocialLink),
        ],
    )
    def test_whitespace_records_dropped(self, generate, record_cls):
        assert generate([record_cls(), blank_record(record_cls)]) == []

    def test_missing_list_is_empty(self):
        assert generate_experience_content(None) == []
        assert generate_education_content(None) == []

    def test_experience(self):
        exp = Experience(
            position="Dev",
            company="Acme",
            start_date="2020",
            end_date="2021",
            is_present=True,
            company_url="https://acme.io",
            achievements=["Shipped #1", "  "],
        )
        item = generate_experience_content([exp])[0]
        assert item.title == "Dev at Acme"
        assert item.date == "2020 – Present"
        assert item.content == '#link("https://acme.io")[Website #sym.arrow.tr]'
        assert item.achievements == ["Shipped \\#1"]

    def test_education(self):
        edu = Education(
            institution="MIT",
            degree="BSc",
            field_of_study="CS",
            graduation_score="4.0",
            description="Honors",
        )
        item = generate_education_content([edu])[0]
        assert item.title == "BSc in CS at MIT"
        assert item.additional_info == "*Grade:* 4.0\n\nHonors"

    def test_education_without_extras(self):
        item = generate_education_content([Education(institution="MIT")])[0]
        assert item.title == "MIT"
        assert item.additional_info is None

    def test_volunteering(self):
        vol = Volunteering(organization="Code Club", position="Mentor", achievements=["Taught"])
        item = generate_volunteering_content([vol])[0]
        assert item.title == "Mentor at Code Club"
        assert item.achievements == ["Taught"]

    def test_projects(self):
        item = generate_projects_content(
            [Project(title="Tool", url="https://t.io", description="CLI")]
        )[0]
        assert item.title == '#block(below: 0.6em)[*Tool* • #link("https://t.io")[Website #sym.arrow.tr]]'
        assert item.content == "CLI"

    def test_project_without_title(self):
        item = generate_projects_content([Project(description="Just text")])[0]
        assert item.title == ""
        assert item.content == "Just text"

    def test_structured_skills(self):
        contents = generate_skills_content(
            [
                SkillItem(title="Lang", description="Py"),
                SkillItem(title="Lang"),
                SkillItem(description="Py"),
                SkillItem(),
            ],
            technical_skills="ignored",
        )
        assert [c.content for c in contents] == ["*Lang:* Py", "*Lang*", "Py"]

    def test_legacy_skills_fallback(self):
        contents = generate_skills_content([], "Python, Go")
        assert [c.content for c in contents] == ["Python, Go"]

    def test_no_skills_at_all(self):
        assert generate_skills_content(None, "  ") == []

    def test_languages(self):
        contents = generate_languages_content(
            [Language(name="English", proficiency="Native"), Language(name="German")]
        )
        assert [c.content for c in contents] == ["*English* - Native", "*German*"]

    def test_certificates(self):
        item = generate_certificates_content(
            [Certificate(title="AWS", issuer="Amazon", date="2023", description="Pro")]
        )[0]
        assert item.title == "AWS from Amazon"
        assert item.date == "2023"
        assert item.additional_info == "Pro"

    def test_contact(self):
        data = ResumeData(email="a@b.co", location="Berlin")
        contents = generate_contact_content(data)
        assert [c.content for c in contents] == ['#link("mailto:a@b.co")[a\\@b.co]', "Berlin"]

    def test_social_links(self):
        data = ResumeData(
            social_links=[
                SocialLink(platform="github", url="https://github.com/x"),
                SocialLink(platform="other", url="https://x.blog", custom_label="Blog"),
                SocialLink(platform="linkedin", url=""),
            ]
        )
        contents = generate_social_links_content(data)
        assert [c.content for c in contents] == [
            '#link("https://github.com/x")[GitHub]',
            '#link("https://x.blog")[Blog]',
        ]


class TestFormatters:
    def test_block_spacing(self):
        spacing = SectionSpacing(spacing="block", item_spacing="0.6em")
        assert format_section_items(["a", "b"], spacing) == (
            "#block(above: 0em, below: 0.6em)[a]#block(above: 0em, below: 0.6em)[b]"
        )

    def test_joined(self):
        assert format_section_items(["a", "b"], SectionSpacing(join_separator=", ")) == "a, b"

    def test_social_links_horizontal(self):
        contents = [SectionContent(content="A"), SectionContent(content="B")]
        layout = SocialLinksLayout(orientation="horizontal", placement="header", separator=" | ")
        assert format_social_links(contents, layout) == "A | B"

    def test_social_links_vertical_sidebar(self):
        contents = [SectionContent(content="A")]
        assert format_social_links(contents, SocialLinksLayout()) == "#block(above: 0em, below: 0.6em)[A]"

    def test_experience_items(self, default_layout):
        contents = [SectionContent(title="Dev at Acme", date="2020", achievements=["x"])]
        assert format_experience_items(contents, default_layout, 14) == (
            '#text(size: 15pt, weight: "bold")[Dev at Acme]\n\n'
            "#text(size: 12pt, fill: gray)[2020]\n\n"
            "- x"
        )

    def test_experience_records_two_column(self, default_layout):
        contents = [SectionContent(title="A"), SectionContent(title="B")]
        result = format_experience_items(contents, default_layout, 14)
        assert result == '#text(size: 15pt, weight: "bold")[A]\n\n#text(size: 15pt, weight: "bold")[B]'

    def test_experience_records_single_column(self, compact_layout):
        contents = [SectionContent(title="A"), SectionContent(title="B")]
        result = format_experience_items(contents, compact_layout, 14)
        assert result.count("#block(above: 0em, below: 0.8em)[") == 2

    def test_education_items(self, default_layout):
        contents = [SectionContent(title="MIT", date="2018", additional_info="*Grade:* A")]
        assert format_education_items(contents, default_layout, 14) == (
            '#text(size: 15pt, weight: "bold")[MIT]\n\n'
            "#text(size: 12pt, fill: gray)[2018]\n\n"
            "*Grade:* A"
        )

    def test_projects_items(self, default_layout):
        contents = [SectionContent(title="T", content="D")]
        assert format_projects_items(contents, default_layout) == "#block(above: 0em, below: 0.8em)[T\n\nD]"

    def test_certificates_items(self, compact_layout):
        contents = [
            SectionContent(title="AWS from Amazon", date="2023", content="L", additional_info="desc"),
            SectionContent(date="2020"),
        ]
        assert format_certificates_items(contents, compact_layout) == (
            "#block(above: 0em, below: 0.8em)[AWS from Amazon 2023\nL\ndesc]"
            "#block(above: 0em, below: 0.8em)[2020]"
        )

    def test_wrap_blank_content(self):
        assert wrap_in_section_block("Skills", "  \n", 14, lambda text, size: text) == ""

    def test_wrap(self):
        result = wrap_in_section_block("Skills", "body", 14, lambda text, size: f"<{text}>")
        assert result == "#block(above: 0em, below: 1.4em)[\n<Skills>\n\nbody\n]"


class TestRenderers:
    def test_empty_data_renders_nothing(self, default_layout):
        data = ResumeData()
        for renderer in SECTION_RENDERERS.values():
            assert renderer(data, 14, default_layout) == ""

    def test_default_header(self, default_layout):
        data = ResumeData(experiences=[Experience(position="Dev")])
        assert "[Employment History]" in render_experience(data, 14, default_layout)

    def test_custom_header(self, default_layout):
        data = ResumeData(
            experiences=[Experience(position="Dev")],
            section_headers={"experience": "Work"},
        )
        assert "[Work]" in render_experience(data, 14, default_layout)

    def test_blank_custom_header_falls_back(self, default_layout):
        data = ResumeData(
            experiences=[Experience(position="Dev")],
            section_headers={"experience": "   "},
        )
        assert "[Employment History]" in render_experience(data, 14, default_layout)

    def test_header_follows_font_size(self, default_layout):
        data = ResumeData(experiences=[Experience(position="Dev")])
        assert '#text(size: 14pt, weight: "bold")[Employment History]' in render_experience(
            data, 10, default_layout
        )

    def test_skills_legacy(self, default_layout):
        data = ResumeData(technical_skills="Python, SQL")
        assert "Python, SQL" in render_skills(data, 14, default_layout)

    def test_profile_escaped(self, default_layout):
        data = ResumeData(summary="I love #typst")
        assert "I love \\#typst" in render_profile(data, 14, default_layout)

    def test_social_links_sidebar_has_header(self, sample_data, default_layout):
        result = render_social_links(sample_data, 14, default_layout)
        assert result.startswith("#block(above: 0em, below: 1.4em)[")
        assert "[Links]" in result

    def test_social_links_inline_in_header(self, sample_data, compact_layout):
        result = render_social_links(sample_data, 14, compact_layout)
        assert result == '#link("https://github.com/ada")[GitHub] • #link("https://ada.blog")[Blog]'

    def test_renderers_do_not_mutate_input(self, sample_data, default_layout):
        before = sample_data.model_dump()
        for renderer in SECTION_RENDERERS.values():
            renderer(sample_data, 14, default_layout)
        assert sample_data.model_dump() == before
