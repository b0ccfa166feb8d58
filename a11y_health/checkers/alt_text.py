"""Alt text checker (WCAG 1.1.1)."""

from a11y_health.checkers.base import ScriptChecker, scan_script
from a11y_health.models.issues import CheckType, WcagLevel

ALT_TEXT_SCAN = scan_script(r"""
  const results = [];
  for (const img of Array.from(document.querySelectorAll('img'))) {
    const alt = img.getAttribute('alt');
    const attributes = { src: img.getAttribute('src') || '', alt: alt || '' };
    const trimmed = (alt || '').trim();
    const lowered = trimmed.toLowerCase();

    if (alt === null) {
      results.push({
        ...describe(img, attributes),
        severity: 'error',
        message: 'Image missing alt attribute',
        description: 'All images must have an alt attribute for screen readers',
        suggestedFix: 'Add alt="" for decorative images or alt="description" for informative images',
      });
    } else if (alt !== '' && trimmed.length < 3) {
      results.push({
        ...describe(img, attributes),
        severity: 'error',
        message: 'Image has insufficient alt text',
        description: 'Images should have descriptive alt text that conveys the meaning of the image',
        suggestedFix: 'Provide meaningful alt text that describes the image content or purpose',
      });
    } else if (trimmed && (lowered.includes('image') || lowered.includes('picture') ||
               lowered.includes('photo') || lowered.startsWith('img_'))) {
      results.push({
        ...describe(img, attributes),
        severity: 'warning',
        message: 'Alt text may be redundant or non-descriptive',
        description: "Alt text should describe the content/purpose, not state that it's an image",
        suggestedFix: 'Replace with descriptive text about what the image shows or its purpose',
      });
    }
  }
  return results;
""")


class AltTextChecker(ScriptChecker):
    """Images need an alt attribute; decorative images use alt=""."""

    type = CheckType.ALT_TEXT
    wcag_level = WcagLevel.A
    script = ALT_TEXT_SCAN
