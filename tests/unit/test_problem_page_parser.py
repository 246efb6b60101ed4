"""Unit tests for problem page field extraction."""

import pytest

from domain.exceptions import DeprecatedSampleLayoutError, StatementNotFoundError
from domain.models import SampleTest
from domain.parsers.problem_page import ProblemPageParser
from pages import (
    EXAMPLE_PAGE,
    HEADER,
    INPUT_SPEC,
    LEGEND,
    OUTPUT_SPEC,
    legacy_sample_tests,
    problem_page,
)


@pytest.fixture
def parser():
    return ProblemPageParser()


class TestProblemPageParser:
    """Test extraction of statement fields from rendered HTML."""

    def test_parses_complete_page(self, parser):
        record = parser.parse(EXAMPLE_PAGE)

        assert record.title == "A. Sum of Numbers"
        assert record.time_limit == "2 seconds"
        assert record.memory_limit == "256 megabytes"
        assert record.tests == [SampleTest(input="3\n1 2 3", output="6")]
        assert record.status == 200

    def test_description_is_second_child_with_math_normalized(self, parser):
        record = parser.parse(EXAMPLE_PAGE)

        assert record.description.startswith("<p>You are given <span>\\(n\\)</span> integers.")
        assert "tex-math" not in record.description
        assert "time limit" not in record.description

    def test_io_specifications_keep_html(self, parser):
        record = parser.parse(EXAMPLE_PAGE)

        assert '<div class="section-title">Input</div>' in record.input_description
        assert "<span>\\(n\\)</span>" in record.input_description
        assert record.output_description == (
            '<div class="section-title">Output</div><p>Print one integer.</p>'
        )

    def test_missing_statement_raises(self, parser):
        html = "<html><body><div class='ttypography'>Nothing here</div></body></html>"

        with pytest.raises(StatementNotFoundError) as exc_info:
            parser.parse(html)

        assert str(exc_info.value) == "Problem statement not found"

    def test_legacy_samples_abort_extraction(self, parser):
        with pytest.raises(DeprecatedSampleLayoutError):
            parser.parse(problem_page(samples=legacy_sample_tests()))

    def test_page_without_samples_has_no_tests(self, parser):
        record = parser.parse(problem_page())

        assert record.tests == []
        assert record.title == "A. Sum of Numbers"

    def test_missing_sections_fall_back_to_placeholders(self, parser):
        record = parser.parse(problem_page(statement=""))

        assert record.title == "Title not found"
        assert record.time_limit == "Time limit not found"
        assert record.memory_limit == "Memory limit not found"
        assert record.description == "Description not found"
        assert record.input_description == "Input description not found"
        assert record.output_description == "Output description not found"
        assert record.tests == []

    def test_missing_specifications_do_not_affect_other_fields(self, parser):
        record = parser.parse(problem_page(statement=HEADER + LEGEND))

        assert record.time_limit == "2 seconds"
        assert "Print their sum." in record.description
        assert record.input_description == "Input description not found"
        assert record.output_description == "Output description not found"

    def test_description_depends_on_child_position(self, parser):
        # Without the header, the legend is first and the input section is second
        record = parser.parse(problem_page(statement=LEGEND + INPUT_SPEC + OUTPUT_SPEC))

        assert record.description.startswith('<div class="section-title">Input</div>')
        assert record.title == "Title not found"

    def test_limit_label_is_stripped_by_length(self, parser):
        header = (
            '<div class="header"><div class="title">B. Limits</div>'
            '<div class="time-limit">time limit per test 1 second</div>'
            '<div class="memory-limit">memory limit per test</div></div>'
        )

        record = parser.parse(problem_page(statement=header + LEGEND))

        assert record.time_limit == "1 second"
        assert record.memory_limit == "Memory limit not found"

    def test_document_is_not_mutated_between_fields(self, parser):
        # Math inside the legend must not leak into later reads
        record = parser.parse(EXAMPLE_PAGE)

        assert record.description.count("\\(") == 1
        assert record.input_description.count("\\(") == 1

    def test_legacy_samples_abort_even_without_other_fields(self, parser):
        with pytest.raises(DeprecatedSampleLayoutError) as exc_info:
            parser.parse(problem_page(statement=legacy_sample_tests()))

        assert str(exc_info.value) == "Depricated/Not Found"
