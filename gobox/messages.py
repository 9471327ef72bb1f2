"""User-facing message texts for the gobox command line."""

# Errors
ERR_NO_GO_MOD_FOUND = (
    "No go.mod file found in the current directory. Would you like to create one?"
)
ERR_OPERATION_ABORTED = "Operation aborted by the user."
ERR_PACKAGE_INSTALL_FAILED = "Failed to install the package: %s\n"
ERR_PACKAGE_SAVE_FAILED = "Failed to save the package information: %s"
ERR_PROJECT_ALREADY_EXISTS = (
    "Project already exists. Please choose a different name or remove the existing directory."
)
ERR_PROMPT_FAILED = "Prompt failed. Please try again."
ERR_GO_MOD_INIT_FAILED = "Failed to initialize go.mod file."
ERR_LOADING_PACKAGES_FAILED = "Failed to load packages. Please try again."
ERR_REMOVE_PACKAGE_FAILED = "Failed to remove the package: %s\n"

# Prompts
PROMPT_REMOVE_PACKAGE = "Which package do you want to remove?"
PROMPT_SELECT_PACKAGES_TO_INSTALL = "Select packages to install:"
PROMPT_MODULE_NAME = "Module name:"
PROMPT_CONFIRM_PACKAGE_REMOVAL = "Are you sure you want to remove this package?"

# Status
STATUS_INSTALLING_PACKAGE = " Installing package: %s\n"
STATUS_PROJECT_INITIALIZING = "Initialize a new Go project..."
STATUS_NO_PACKAGES_FOUND = "No packages installed yet."
STATUS_PACKAGE_REMOVAL_CANCELLED = "Package removal cancelled."
STATUS_NO_PACKAGES_TO_INSTALL = (
    "No packages available to install. Skipping package installation."
)

# Success
SUCCESS_GO_MOD_CREATED = "go.mod file created successfully."
SUCCESS_PACKAGE_INSTALLED = "Package installed successfully: %s\n"
SUCCESS_PROJECT_INITIALIZED = "Project initialized successfully with module name: %s"
SUCCESS_PACKAGE_REMOVED = "Package removed successfully: %s"