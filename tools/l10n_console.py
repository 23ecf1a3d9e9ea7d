from rich.console import Console

# Diagnostic stream for traces and fatal errors.
# Report output goes to stdout; everything here lands on stderr so it never pollutes a pipe.
err_console = Console(stderr=True, highlight=False)

def trace(message):
    err_console.print(message, style="dim", markup=False, soft_wrap=True)

def warn(message):
    err_console.print(f"⚠️  {message}", style="yellow", markup=False, soft_wrap=True)

def error(message):
    err_console.print(f"❌ {message}", style="bold red", markup=False, soft_wrap=True)
