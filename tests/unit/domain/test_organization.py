from datetime import date

from helperkit.domain.organization import Organization


def test_display_name_prefers_name():
    assert Organization(name="Acme", legal_name="Acme SAS").get_display_name() == "Acme"
    assert Organization(legal_name="Acme SAS").get_display_name() == "Acme SAS"
    assert Organization().get_display_name() is None


def test_department_links_organizations():
    parent = Organization(name="Acme", founding_date=date(1990, 1, 1))
    child = Organization(name="Acme R&D", department=parent)
    assert child.department.founding_date.year == 1990
