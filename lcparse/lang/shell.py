"""Handles interactive mode for lcparse. Uses cmd as backend."""

import cmd

from lcparse.pure.parser import parse


class Shell(cmd.Cmd):
    """Lambda calculus parser shell: every line is parsed and echoed back in canonical form."""
    intro = "Lambda calculus parser :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def is_command(self, line):
        """Whether line is a shell command rather than a λ-term. Variables may be named like commands, so only the
        bare commands and 'tree <term>' count, and never in the middle of a continued term.
        """
        line = line.strip()
        if self._tmp_line:
            return False
        return line in ("exit", "EOF", "help", "?") or (line.startswith("tree ") and bool(line[5:].strip()))

    def onecmd(self, line):
        if self.is_command(line) or (not line.strip() and not self._tmp_line):
            return super().onecmd(line)
        return self.default(line)

    def default(self, line):
        """Parses a λ-term (possibly spread over several lines) and prints its canonical form."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, False)
            if self._tmp_line:
                line = self._tmp_line + "\n" + line
                add_to_prev = line.count("(") > line.count(")")

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            try:
                self.sess.add(line, self.line_num - line.count("\n"))
            except ValueError:
                return  # if line is empty, terminate

            self.sess.run()

            while self.sess.results:
                self.stdout.write(self.sess.pop() + "\n")

    def do_tree(self, arg):
        """Parses a λ-term and prints its syntax tree: tree \\x y . x"""
        with self.sess.error_handler:
            self.line_num += 1
            self.sess.error_handler.register_line(self.sess.path, arg, self.line_num)
            self.stdout.write(parse(arg, strict=self.sess.strict).display() + "\n")
            self.sess.error_handler.remove_line(self.sess.path)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        self.stdout.write("Welcome to the lcparse shell!\n\n"
                          "Type a λ-term using '\\' for λ, for example '(\\x y . y x) a'. The term is parsed \n"
                          "and printed back in canonical form, with the least parentheses needed and \n"
                          "consecutive binders merged. Type 'tree <term>' to see its syntax tree instead.\n"
                          "Unclosed parentheses continue the term on the next line.\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits shell."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits shell."""
        return True
