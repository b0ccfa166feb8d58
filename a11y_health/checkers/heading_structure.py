"""Heading hierarchy checker (WCAG 1.3.1)."""

from a11y_health.checkers.base import ScriptChecker, scan_script
from a11y_health.models.config import HealthCheckConfig
from a11y_health.models.issues import CheckType, WcagLevel

HEADING_SCAN = scan_script(r"""
  const results = [];
  const headings = Array.from(document.querySelectorAll('h1, h2, h3, h4, h5, h6'));

  if (headings.length === 0) {
    results.push({
      severity: 'warning',
      message: 'No headings found on page',
      description: 'Pages should have a proper heading structure for navigation and screen readers',
      suggestedFix: 'Add at least one h1 heading to establish page hierarchy',
    });
    return results;
  }

  const h1Count = headings.filter((h) => h.tagName.toLowerCase() === 'h1').length;
  if (h1Count === 0) {
    results.push({
      severity: 'error',
      message: 'No H1 heading found',
      description: 'Every page should have exactly one H1 heading that describes the main content',
      suggestedFix: 'Add a single H1 heading that describes the main purpose of the page',
    });
  } else if (h1Count > 1) {
    results.push({
      severity: 'warning',
      message: `Multiple H1 headings found (${h1Count})`,
      description: 'Pages should typically have only one H1 heading for proper document structure',
      suggestedFix: 'Use only one H1 heading and use H2-H6 for subsections',
    });
  }

  let previousLevel = 0;
  for (const heading of headings) {
    const level = parseInt(heading.tagName.charAt(1), 10);
    const text = (heading.textContent || '').trim();
    const attributes = { class: typeof heading.className === 'string' ? heading.className : '' };

    if (!text) {
      results.push({
        ...describe(heading, attributes),
        severity: 'error',
        message: 'Empty heading found',
        description: 'Headings should contain meaningful text that describes the section',
        suggestedFix: 'Add descriptive text to the heading or remove if not needed',
      });
    }

    if (previousLevel > 0 && level > previousLevel + maxJump) {
      results.push({
        ...describe(heading, attributes, text),
        severity: 'warning',
        message: `Heading level skipped: H${previousLevel} to H${level}`,
        description: 'Heading levels should not skip levels for proper document structure',
        suggestedFix: `Use H${previousLevel + 1} instead of H${level} for proper hierarchy`,
      });
    }

    if (text.length > 120) {
      results.push({
        ...describe(heading, attributes, text),
        severity: 'info',
        message: 'Heading text is very long',
        description: 'Long headings can be difficult to navigate with screen readers',
        suggestedFix: 'Consider shortening the heading while maintaining its descriptive value',
      });
    }

    if (/^[\d\s\-_.]+$/.test(text)) {
      results.push({
        ...describe(heading, attributes, text),
        severity: 'warning',
        message: 'Heading contains only numbers or symbols',
        description: 'Headings should be descriptive and meaningful for screen reader users',
        suggestedFix: 'Add descriptive text to explain what this heading represents',
      });
    }

    previousLevel = level;
  }
  return results;
""", argument="maxJump")


class HeadingStructureChecker(ScriptChecker):
    """One H1, no empty headings, no skipped levels beyond the threshold."""

    type = CheckType.HEADING_STRUCTURE
    wcag_level = WcagLevel.A
    script = HEADING_SCAN

    def script_argument(self, config: HealthCheckConfig) -> int:
        return config.thresholds.max_heading_jump
