import pytest

from suite_tools.report_tools import count_tests, list_tests


@pytest.fixture
def tests_dir(tmp_path):
    (tmp_path / "test_home_page.py").write_text(
        "class TestHomePage:\n"
        "    def test_home_page_main_heading(self): pass\n"
        "    def test_home_page_logo_displayed(self): pass\n"
        "    def helper(self): pass\n",
        encoding="utf-8",
    )
    (tmp_path / "test_sample_ui.py").write_text(
        "def test_example_domain_loads(): pass\n",
        encoding="utf-8",
    )
    (tmp_path / "test_broken.py").write_text("class TestBroken(:\n", encoding="utf-8")
    (tmp_path / "conftest.py").write_text("def test_not_collected(): pass\n", encoding="utf-8")
    return tmp_path


def test_lists_classes_and_module_functions(tests_dir):
    catalog = list_tests(tests_dir)

    assert catalog == {
        "TestHomePage": ["test_home_page_main_heading", "test_home_page_logo_displayed"],
        "<module>:test_sample_ui": ["test_example_domain_loads"],
    }
    assert count_tests(catalog) == 3


def test_filter_by_class(tests_dir):
    assert list(list_tests(tests_dir, "TestHomePage")) == ["TestHomePage"]
    assert list_tests(tests_dir, "TestNavigation") == {}


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_tests(tmp_path / "nope")


def test_real_ui_suite_is_listed(project_root):
    catalog = list_tests(project_root / "prismsuite" / "ui_testing" / "tests")

    assert "test_browser_back_button" in catalog["TestNavigation"]
    assert "test_submit_contact_form" in catalog["TestContactPage"]
