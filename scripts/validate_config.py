#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from warmnest.breathing.catalog import ExerciseCatalog
from warmnest.config.loader import ConfigLoader
from warmnest.config.validation import ConfigValidator
from warmnest.errors import ConfigurationError


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating WarmNest configuration...")

    loader = ConfigLoader.create(config_dir)
    all_valid = True

    print(f"\n⚙️  Validating {loader.config_dir / 'warmnest.yaml'}...")
    errors = ConfigValidator.validate_config(loader.merge_config())
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Timer and logging configuration is valid")

    print(f"\n🫁 Validating {loader.config_dir / 'exercises.yaml'}...")
    try:
        catalog = ExerciseCatalog.load(loader.config_dir)
    except ConfigurationError as e:
        print(f"❌ {e}")
        all_valid = False
    else:
        for exercise in catalog:
            print(f"  • {exercise.slug}: {exercise.cycle.duration_seconds}s cycle, "
                  f"{exercise.total_cycles} cycles in {exercise.duration_minutes} min")
            if exercise.total_cycles == 0:
                print("    ⚠️  cycle is longer than the session")
        print(f"✅ {len(catalog)} exercises loaded")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
