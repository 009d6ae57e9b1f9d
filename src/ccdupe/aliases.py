from ccdupe.core.models import HashAlgorithmName

HASH_ALIASES = {
    "xxhash": HashAlgorithmName.XXHASH,
    "xxh64": HashAlgorithmName.XXHASH,
    "md5": HashAlgorithmName.MD5,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Fingerprint used to bucket candidates before byte-by-byte verification:\n"
    "  xxhash (xxh64) : xxHash64, fast non-cryptographic digest (default)\n"
    "  md5            : MD5 digest\n"
    "Example        : %(prog)s --hash md5 ~/Downloads\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in Downloads and decide interactively which copy to delete
  %(prog)s ~/Downloads

  Ignore empty files, follow symbolic links
  %(prog)s --minsize=1 --follow-symlinks ~/Downloads

  Machine-readable report, nothing is deleted
  %(prog)s --json --minsize=1K ~/Downloads > report.json

  Move chosen files to the system trash instead of deleting them
  %(prog)s --trash ~/Downloads

  Start the HTTP API (POST /scan, POST /delete)
  %(prog)s --web --port 8080
"""
