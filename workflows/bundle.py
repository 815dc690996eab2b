"""Flattening of the distributed setup bundle into the project root"""

import os
import shutil
from typing import Optional


def relocate_bundle(bundle_dir: str, bundle_name: str) -> Optional[str]:
    """
    Move everything in bundle_dir (hidden entries included) into its parent
    and remove the emptied bundle directory.

    Nothing happens unless bundle_dir is literally named bundle_name.

    Returns:
        str: the parent directory the files now live in, or None if skipped
    """
    bundle_dir = os.path.abspath(bundle_dir)
    if not os.path.isdir(bundle_dir) or os.path.basename(bundle_dir) != bundle_name:
        print(f"⚠️  Not in {bundle_name} directory or directory structure unexpected")
        return None

    parent_dir = os.path.dirname(bundle_dir)
    print(f"📦 Moving files from {bundle_dir} to {parent_dir}...")

    for entry in sorted(os.listdir(bundle_dir)):
        source = os.path.join(bundle_dir, entry)
        target = os.path.join(parent_dir, entry)
        if os.path.isdir(target) and not os.path.islink(target):
            print(f"⚠️  {target} already exists, leaving {entry} in {bundle_name}")
            continue
        shutil.move(source, target)

    try:
        os.rmdir(bundle_dir)
    except OSError:
        print(f"⚠️  Could not remove {bundle_name} directory (not empty)")
    else:
        print("✅ Files moved successfully!")

    return parent_dir
