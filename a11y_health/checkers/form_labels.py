"""Form label checker (WCAG 1.3.1)."""

from a11y_health.checkers.base import ScriptChecker, scan_script
from a11y_health.models.issues import CheckType, WcagLevel

FORM_LABEL_SCAN = scan_script(r"""
  const results = [];
  const controls = document.querySelectorAll(
    'input:not([type="hidden"]):not([type="submit"]):not([type="button"]):not([type="reset"]), textarea, select'
  );

  for (const control of Array.from(controls)) {
    const controlId = control.id;
    const controlType = control.type || control.tagName.toLowerCase();
    let labelText = null;
    let labelMethod = '';

    if (controlId) {
      const label = document.querySelector(`label[for="${CSS.escape(controlId)}"]`);
      if (label) {
        labelText = (label.textContent || '').trim();
        labelMethod = 'explicit label';
      }
    }
    if (labelText === null) {
      const parentLabel = control.closest('label');
      if (parentLabel) {
        labelText = (parentLabel.textContent || '').trim();
        labelMethod = 'implicit label';
      }
    }
    if (labelText === null) {
      const ariaLabel = (control.getAttribute('aria-label') || '').trim();
      if (ariaLabel) {
        labelText = ariaLabel;
        labelMethod = 'aria-label';
      }
    }
    if (labelText === null) {
      const labelledby = control.getAttribute('aria-labelledby');
      if (labelledby) {
        const labelling = labelledby.split(/\s+/).map((id) => document.getElementById(id)).filter(Boolean);
        if (labelling.length > 0) {
          labelText = labelling.map((el) => (el.textContent || '').trim()).join(' ').trim();
          labelMethod = 'aria-labelledby';
        }
      }
    }
    if (labelText === null) {
      const title = (control.getAttribute('title') || '').trim();
      if (title) {
        labelText = title;
        labelMethod = 'title attribute';
      }
    }

    const placeholder = (control.getAttribute('placeholder') || '').trim();

    if (labelText === null && !placeholder) {
      results.push({
        ...describe(control, { type: controlType, name: control.getAttribute('name') || '', id: controlId || '' }),
        severity: 'error',
        message: 'Form control missing label',
        description: 'All form controls must have associated labels for screen readers',
        suggestedFix: 'Add a <label> element, aria-label, or aria-labelledby attribute',
      });
    } else if (labelText === null) {
      results.push({
        ...describe(control, { type: controlType, placeholder: placeholder }),
        severity: 'warning',
        message: 'Form control relies only on placeholder text',
        description: 'Placeholder text disappears when typing and is not reliable for labeling',
        suggestedFix: 'Add a proper label in addition to or instead of the placeholder',
      });
    } else if (labelText.length === 0) {
      results.push({
        ...describe(control, { type: controlType }),
        severity: 'error',
        message: 'Form control has empty label',
        description: `Form control has ${labelMethod} but the label text is empty`,
        suggestedFix: 'Provide meaningful text in the label',
      });
    } else if (labelText.length < 2) {
      results.push({
        ...describe(control, { type: controlType }, labelText),
        severity: 'warning',
        message: 'Form control has very short label',
        description: `Label text "${labelText}" may not be descriptive enough`,
        suggestedFix: 'Provide more descriptive label text',
      });
    }
  }

  for (const field of Array.from(document.querySelectorAll('input[required], textarea[required], select[required]'))) {
    const labelText = (field.closest('label') || {}).textContent || '';
    const parentText = (field.parentElement && field.parentElement.textContent) || '';
    const indicated = field.getAttribute('aria-required') === 'true' ||
      labelText.includes('*') || /required/i.test(parentText);

    if (!indicated) {
      results.push({
        ...describe(field, { required: 'true' }),
        severity: 'warning',
        message: 'Required field not properly indicated',
        description: 'Required fields should be clearly marked for all users',
        suggestedFix: 'Add aria-required="true" or visual indicator (* or "required" text)',
      });
    }
  }
  return results;
""")


class FormLabelsChecker(ScriptChecker):
    """Every form control needs a non-empty accessible label."""

    type = CheckType.FORM_LABELS
    wcag_level = WcagLevel.A
    script = FORM_LABEL_SCAN
