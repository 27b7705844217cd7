import signal
import subprocess

from errors import CommandError

def format_command(cmd, args):
    return " ".join([ str(a) for a in [ cmd ] + list(args) ])

# run external tools with inherited stdio
# every call site passes a label naming the attempted action
class Runner:
    def spawn(self, cmd, args, cwd, label, **kwargs):
        argv = [ str(cmd) ] + [ str(a) for a in args ]

        try:
            proc = subprocess.run(argv, cwd = cwd, **kwargs)
        except OSError as e:
            raise CommandError(label) from e

        # exit if child received SIGINT
        if proc.returncode == -signal.SIGINT:
            raise KeyboardInterrupt()

        return proc

    def run(self, cmd, args, cwd = None, label = None):
        label = label or format_command(cmd, args)
        status = self.spawn(cmd, args, cwd, label).returncode

        if status != 0:
            raise CommandError(label, status)

    # like run(), but the caller interprets the exit status
    def status(self, cmd, args, cwd = None, label = None):
        return self.spawn(cmd, args, cwd, label or format_command(cmd, args)).returncode

    # stdout only, exit status is not checked
    def output(self, cmd, args, cwd = None, label = None):
        proc = self.spawn(cmd, args, cwd, label or format_command(cmd, args), stdout = subprocess.PIPE)
        return proc.stdout.decode("utf-8", errors = "replace").strip()
