"""Value types for forms, spans, matches, summaries, reports and config tables."""