"""ARIA attribute and role checker (WCAG 4.1.2)."""

from a11y_health.checkers.base import ScriptChecker, scan_script
from a11y_health.models.issues import CheckType, WcagLevel

VALID_ARIA_ATTRIBUTES = [
    "aria-label", "aria-labelledby", "aria-describedby", "aria-hidden",
    "aria-expanded", "aria-pressed", "aria-checked", "aria-selected",
    "aria-current", "aria-live", "aria-atomic", "aria-busy",
    "aria-controls", "aria-owns", "aria-flowto", "aria-activedescendant",
    "aria-autocomplete", "aria-disabled", "aria-dropeffect", "aria-grabbed",
    "aria-haspopup", "aria-invalid", "aria-level", "aria-multiline",
    "aria-multiselectable", "aria-orientation", "aria-posinset",
    "aria-readonly", "aria-relevant", "aria-required", "aria-setsize",
    "aria-sort", "aria-valuemax", "aria-valuemin", "aria-valuenow",
    "aria-valuetext", "role",
]

VALID_ROLES = [
    "alert", "alertdialog", "application", "article", "banner", "button",
    "cell", "checkbox", "columnheader", "combobox", "complementary",
    "contentinfo", "definition", "dialog", "directory", "document",
    "feed", "figure", "form", "grid", "gridcell", "group", "heading",
    "img", "link", "list", "listbox", "listitem", "log", "main",
    "marquee", "math", "menu", "menubar", "menuitem", "menuitemcheckbox",
    "menuitemradio", "navigation", "none", "note", "option", "presentation",
    "progressbar", "radio", "radiogroup", "region", "row", "rowgroup",
    "rowheader", "scrollbar", "search", "searchbox", "separator",
    "slider", "spinbutton", "status", "switch", "tab", "table",
    "tablist", "tabpanel", "term", "textbox", "timer", "toolbar",
    "tooltip", "tree", "treegrid", "treeitem",
]

# State attributes that may legitimately be empty
EMPTY_ALLOWED = ["aria-hidden", "aria-expanded", "aria-pressed", "aria-checked", "aria-selected"]

BOOLEAN_ATTRIBUTES = [
    "aria-hidden", "aria-expanded", "aria-pressed", "aria-checked", "aria-selected",
    "aria-disabled", "aria-required", "aria-readonly", "aria-multiline",
    "aria-multiselectable", "aria-atomic", "aria-busy",
]

ARIA_SCAN = scan_script(r"""
  const results = [];
  const validAttributes = new Set(rules.attributes);
  const validRoles = new Set(rules.roles);
  const emptyAllowed = new Set(rules.emptyAllowed);
  const booleans = new Set(rules.booleans);

  const flag = (element, attributes, message, description, suggestedFix) => {
    results.push({ ...describe(element, attributes), severity: 'error', message, description, suggestedFix });
  };

  for (const element of Array.from(document.querySelectorAll('*'))) {
    for (const attr of Array.from(element.attributes)) {
      const name = attr.name;
      const value = attr.value;
      if (!name.startsWith('aria-') && name !== 'role') continue;

      if (!validAttributes.has(name)) {
        flag(element, { [name]: value }, `Invalid ARIA attribute: ${name}`,
          'Unknown ARIA attributes can cause accessibility issues',
          `Remove ${name} or use a valid ARIA attribute`);
      }
      if (!value && !emptyAllowed.has(name)) {
        flag(element, { [name]: value }, `Empty value for ARIA attribute: ${name}`,
          'ARIA attributes should have meaningful values',
          `Provide a descriptive value for ${name} or remove the attribute`);
      }
      if (name === 'role' && value && !validRoles.has(value)) {
        flag(element, { role: value }, `Invalid ARIA role: ${value}`,
          'Unknown ARIA roles can cause accessibility issues',
          'Use a valid ARIA role or remove the role attribute');
      }
      if (booleans.has(name) && value && !['true', 'false'].includes(value.toLowerCase())) {
        flag(element, { [name]: value }, `Invalid boolean value for ${name}: ${value}`,
          'Boolean ARIA attributes should have values of "true" or "false"',
          `Change ${name} value to "true" or "false"`);
      }
    }
  }

  const interactive = document.querySelectorAll(
    'button, a, input[type="button"], input[type="submit"], input[type="reset"]'
  );
  for (const element of Array.from(interactive)) {
    const text = (element.textContent || '').trim();
    const value = element.tagName.toLowerCase() === 'input' ? (element.getAttribute('value') || '').trim() : '';
    if (!text && !value && !element.getAttribute('aria-label') &&
        !element.getAttribute('aria-labelledby') && !element.querySelector('img')) {
      flag(element, {}, 'Interactive element missing accessible name',
        'Interactive elements need accessible names for screen readers',
        'Add aria-label, visible text content, or aria-labelledby attribute');
    }
  }
  return results;
""", argument="rules")

ARIA_RULES = {
    "attributes": VALID_ARIA_ATTRIBUTES,
    "roles": VALID_ROLES,
    "emptyAllowed": EMPTY_ALLOWED,
    "booleans": BOOLEAN_ATTRIBUTES,
}


class AriaAttributesChecker(ScriptChecker):
    """Known ARIA attributes and roles with well-formed values; named controls."""

    type = CheckType.ARIA_ATTRIBUTES
    wcag_level = WcagLevel.A
    script = ARIA_SCAN

    def script_argument(self, config):
        return ARIA_RULES
