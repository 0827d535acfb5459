"""Tests for individual form fields."""
import pytest
from flask import render_template_string
from markupsafe import Markup

from screenkit.exceptions import FieldRequiredAttributeError
from screenkit.screen.fields import CheckBox, Input, Label, Select, TextArea
from screenkit.template_filters import render_markdown


def test_input_renders_inline_attributes(app):
    html = Input.make('title').value('Dune').title('Title').required().render()

    assert '<input class="form-control" id="field-title" name="title" required type="text" value="Dune">' in html
    assert '<label for="field-title">Title <span class="text-danger">*</span></label>' in html


def test_input_escapes_values(app):
    html = Input.make('title').value('<script>alert(1)</script>').render()

    assert '<script>' not in html
    assert 'value="&lt;script&gt;alert(1)&lt;/script&gt;"' in html


def test_attributes_outside_whitelist_stay_off_the_element(app):
    html = Input.make('title').set('secret', 'x').render()

    assert 'secret' not in html


def test_hidden_field_renders_nothing(app):
    field = Input.make('password').can_see(False)

    assert not field.is_see()
    assert field.render() is None


def test_missing_required_attribute_raises(app):
    with pytest.raises(FieldRequiredAttributeError) as excinfo:
        Input.make().render()

    assert excinfo.value.attribute == 'name'
    assert 'Input' in str(excinfo.value)


def test_label_does_not_require_a_name(app):
    html = Label.make().title('Read only').render()

    assert 'Read only' in html


def test_explicit_id_is_kept(app):
    html = Input.make('title').set('id', 'custom-id').render()

    assert 'id="custom-id"' in html


def test_textarea_renders_value_as_content(app):
    html = TextArea.make('bio').value('Hello & goodbye').rows(5).render()

    assert 'rows="5"' in html
    assert '>Hello &amp; goodbye</textarea>' in html


def test_select_marks_selected_option(app):
    html = Select.make('status').options({'draft': 'Draft', 'live': 'Published'}).value('live').render()

    assert '<option value="draft">Draft</option>' in html
    assert '<option value="live" selected>Published</option>' in html


def test_select_multiple_and_empty_option(app):
    field = Select.make('tags').options(['a', 'b', 'c']).empty('None').multiple().value(['a', 'c'])
    html = field.render()

    assert 'name="tags[]"' in html
    assert ' multiple ' in html or ' multiple>' in html
    assert '<option value="">None</option>' in html
    assert '<option value="a" selected>a</option>' in html
    assert '<option value="b">b</option>' in html


def test_checkbox_checked_state_and_false_value(app):
    checked = CheckBox.make('active').value(True).send_true_or_false().render()
    unchecked = CheckBox.make('active').value('0').render()

    assert ' checked ' in checked
    assert 'value="1"' in checked
    assert '<input type="hidden" name="active" value="0">' in checked
    assert 'checked' not in unchecked
    assert 'type="hidden"' not in unchecked


def test_help_text_is_rendered_as_markdown(app):
    html = Input.make('title').help('Use **bold** <b>text</b>').render()

    assert '<strong>bold</strong>' in html
    assert '<b>text</b>' not in html


def test_help_text_renders_inline(app):
    html = Input.make('title').help('Shown *below*').render()

    assert '<small class="form-text text-muted">Shown <em>below</em></small>' in html


def test_markdown_filters_keep_paragraphs_only_for_blocks(app):
    assert render_markdown('one\n\ntwo', inline=True).count('<p>') == 2
    assert render_markdown('one') == Markup('<p>one</p>\n')
    assert render_template_string("{{ '**a**'|markdown_inline }}") == '<strong>a</strong>'


@pytest.mark.parametrize('wrapper', ['vertical', 'horizontal'])
def test_popover_is_rendered_next_to_the_title(app, wrapper):
    field = Input.make('title').title('Title').popover('Shown on "hover"')
    html = getattr(field, wrapper)().render()

    assert 'data-toggle="popover"' in html
    assert 'data-content="Shown on &#34;hover&#34;"' in html


def test_no_popover_markup_by_default(app):
    assert 'popover' not in Input.make('title').title('Title').render()


def test_horizontal_wrapper(app):
    html = Input.make('title').title('Title').horizontal().render()

    assert 'form-group row' in html
    assert 'col-sm-3 col-form-label' in html


def test_wrapper_follows_config(app):
    app.config['PANEL_FIELD_WRAPPER'] = 'horizontal'

    html = Input.make('title').render()

    assert 'form-group row' in html
