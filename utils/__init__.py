# Utils package - Claude client, parsing, sanitization and email helpers
