import os

# clone url at branch into dir unless dir already exists
# an existing checkout is trusted as is
# return True if cloned
def sync(runner, dir, url, branch, label):
    if os.path.exists(dir):
        print("  " + os.path.basename(dir) + " directory already exists, skipping clone")
        return False

    runner.run("git", [ "clone", "--branch", branch, url, dir ], label = "clone " + label)
    return True
