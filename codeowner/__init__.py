"""Generate CODEOWNERS files from ownership annotations in a file tree."""
