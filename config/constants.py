"""Application constants.

Centralized location for conversion factors, selection thresholds and
configuration keys used across the formatter.
"""

# ============================================================================
# Conversion Factors
# ============================================================================

# Joules per unit
JOULES_PER_JOULE = 1.0
JOULES_PER_KILOJOULE = 1000.0
JOULES_PER_CALORIE = 4.184
JOULES_PER_KILOCALORIE = 4184.0

# ============================================================================
# Unit Selection Thresholds
# ============================================================================

# Upper bound (inclusive, in joules) for the small unit of each family
JOULE_FAMILY_THRESHOLD = 1000.0
CALORIE_FAMILY_THRESHOLD = 4184.0

# ============================================================================
# Locale Configuration
# ============================================================================

# Locales whose users expect calories rather than joules
CALORIE_LOCALES = frozenset(
    {
        "en_US",
        "en_US_POSIX",
        "haw_US",
        "es_US",
        "chr_US",
        "en_GB",
        "kw_GB",
        "cy_GB",
        "gv_GB",
    }
)

# Used when the environment does not name a locale
DEFAULT_LOCALE_IDENTIFIER = "en_US_POSIX"

# Used for number rendering when Babel does not know the requested locale
DEFAULT_NUMBER_LOCALE = "en_US"

# ============================================================================
# Number Rendering
# ============================================================================

# Fraction digits shown when no fixed digit count is configured
MAX_FRACTION_DIGITS = 3

# Used when a locale has no decimal pattern
DEFAULT_NUMBER_PATTERN = "#,##0.###"

# Decimal precision while rendering; covers the largest finite double
DECIMAL_CONTEXT_PRECISION = 400

# ============================================================================
# Environment Variables
# ============================================================================

ENV_LOCALE = "ENERGY_FORMATTER_LOCALE"
ENV_UNIT_STYLE = "ENERGY_FORMATTER_UNIT_STYLE"
ENV_FOOD_ENERGY = "ENERGY_FORMATTER_FOOD_ENERGY"
ENV_DIGITS = "ENERGY_FORMATTER_DIGITS"

# Checked in order after ENV_LOCALE
SYSTEM_LOCALE_VARIABLES = ("LC_ALL", "LC_NUMERIC", "LANG")

# ============================================================================
# Food Energy Labels
# ============================================================================

FOOD_KILOCALORIE_SHORT = "C"
FOOD_KILOCALORIE_MEDIUM = "Cal"
FOOD_KILOCALORIE_LONG = "Calories"
