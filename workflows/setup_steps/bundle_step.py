"""Bundle relocation step"""
from .base_step import BaseStep
from bundle import relocate_bundle


class RelocateBundleStep(BaseStep):
    """Flattens the setup bundle folder into the project root"""

    title = "Setting up project files"

    def __init__(self, runner, context, bundle_dir=None):
        super().__init__(runner, context)
        self.bundle_dir = bundle_dir or context.project_root

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")
        new_root = relocate_bundle(self.bundle_dir, self.config.get_bundle_name())
        if new_root:
            self.context.project_root = new_root
            print(f"📁 Project root: {new_root}")
        return True
