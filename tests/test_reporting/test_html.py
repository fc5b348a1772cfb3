"""Tests for the HTML matrix renderer."""

import pytest

from provmatrix.errors import RenderError
from provmatrix.matrix.builder import build_matrix
from provmatrix.matrix.models import FeatureDefinition, FeatureEntry, FeatureMatrix
from provmatrix.reporting.html import TEMPLATES_DIR, load_template, render_html


def _tiny_matrix(entry: FeatureEntry | None) -> FeatureMatrix:
    providers = {"P": {"F": entry}} if entry is not None else {"P": {}}
    return FeatureMatrix(
        features=(FeatureDefinition(name="F", description="Feature F"),),
        providers=providers,
    )


class TestLoadTemplate:
    def test_default_template(self):
        assert (TEMPLATES_DIR / "matrix.html.j2").exists()
        assert load_template() is not None

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "matrix.html.j2").write_text(
            "{% for p in matrix.provider_names %}{{ p }};{% endfor %}", encoding="utf-8",
        )
        template = load_template(tmp_path)
        assert render_html(_tiny_matrix(None), template) == "P;"

    def test_missing_template(self, tmp_path):
        with pytest.raises(RenderError, match="Cannot load template"):
            load_template(tmp_path)

    def test_broken_template_data(self, tmp_path):
        (tmp_path / "matrix.html.j2").write_text("{{ matrix.nope }}", encoding="utf-8")
        with pytest.raises(RenderError, match="Failed to render"):
            render_html(_tiny_matrix(None), load_template(tmp_path))


class TestRenderHtml:
    def test_generated_banner(self):
        html = render_html(_tiny_matrix(None))
        assert html.lstrip().startswith("{% comment %}")
        assert "DO NOT HAND EDIT" in html
        assert "{% endcomment %}" in html

    def test_true_cell(self):
        html = render_html(_tiny_matrix(FeatureEntry(has_feature=True)))
        assert 'class="success"' in html
        assert "fa-check text-success" in html

    def test_false_cell(self):
        html = render_html(_tiny_matrix(FeatureEntry(has_feature=False)))
        assert 'class="danger"' in html
        assert "fa-times text-danger" in html

    def test_absent_cell_is_dash(self):
        html = render_html(_tiny_matrix(None))
        assert "fa-minus dim" in html
        assert "success" not in html
        assert "danger" not in html

    def test_unknown_note_is_dash_not_cross(self):
        html = render_html(_tiny_matrix(FeatureEntry(has_feature=None, comment="pending")))
        assert "fa-minus dim" in html
        assert "danger" not in html
        assert 'title="pending"' in html

    def test_comment_tooltip_escaped(self):
        entry = FeatureEntry(has_feature=True, comment='needs "quotes" & <tags>')
        html = render_html(_tiny_matrix(entry))
        assert "has-tooltip" in html
        assert "&lt;tags&gt;" in html
        assert "<tags>" not in html

    def test_feature_description_tooltip(self):
        html = render_html(_tiny_matrix(None))
        assert 'title="Feature F"' in html

    def test_full_matrix_layout(self, sample_registry):
        html = render_html(build_matrix(sample_registry))
        # Provider columns in sorted order
        assert html.index(">BOTH<") < html.index(">REGONLY<") < html.index(">ZETA<")
        assert ">NONE<" not in html
        # Feature rows in display order
        assert html.index(">Official Support</th>") < html.index(">no_purge</th>")
        assert html.count("<tr>") == 1 + 10
        assert html.count("<td") == 3 * 10
