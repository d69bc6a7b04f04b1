"""IELTS Reading Locator: evidence-location practice for IELTS Academic Reading."""
