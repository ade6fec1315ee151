# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import equal_to, instance_of
from hamcrest.core.base_matcher import BaseMatcher

from parchment.read.pdf.objects import PdfStream, PdfObjectReference

class ComposedMatcher (BaseMatcher):

    def _matches (self, item):
        self.failed_matcher = None
        self.mismatch_item = None
        self.extra_message = None

        for true_item, matcher, extra_message in \
                self.__assertion_triples(item):
            if not matcher.matches(true_item):
                self.failed_matcher = matcher
                self.mismatch_item = true_item
                self.extra_message = extra_message
                return False

        return True

    def describe_to (self, description):
        if self.extra_message is not None:
            description.append_text("{} ".format(self.extra_message))

        self.failed_matcher.describe_to(description)

    def describe_mismatch (self, item, description):
        self.failed_matcher.describe_mismatch(self.mismatch_item,
                                              description)

    def __assertion_triples (self, item):
        return (self.__get_triple(x, item)
                        for x in self.assertion(item))

    def __get_triple (self, possible_tuple, item):
        if isinstance(possible_tuple, tuple):
            return self.__get_triple_from_tuple(possible_tuple, item)

        else:
            return item, possible_tuple, None

    def __get_triple_from_tuple (self, definite_tuple, item):
        if len(definite_tuple) == 3:
            return definite_tuple

        else:
            assert len(definite_tuple) == 2
            return definite_tuple + (None,)

class a_reference_to (ComposedMatcher):

    def __init__ (self, number, generation = 0):
        self.number = number
        self.generation = generation

    def assertion (self, item):
        yield instance_of(PdfObjectReference)
        yield item.number, equal_to(self.number), "object number"
        yield item.generation, equal_to(self.generation), "generation"

class a_stream_with (ComposedMatcher):

    def __init__ (self, data, **entries):
        self.data = data
        self.entries = entries

    def assertion (self, item):
        yield instance_of(PdfStream)
        yield item.data, equal_to(self.data), "stream data"

        for key, value in self.entries.items():
            yield item.dictionary.get(key), equal_to(value), key

class raises_at (BaseMatcher):
    """Like hamcrest's `raises`, but also checks the error's position"""

    def __init__ (self, exception_class, position):
        self.exception_class = exception_class
        self.position = position
        self.actual = None

    def _matches (self, item):
        try:
            item()

        except self.exception_class as error:
            self.actual = error
            return error.position == self.position

        except Exception as error:
            self.actual = error
            return False

        self.actual = None
        return False

    def describe_to (self, description):
        description.append_text("{} raised at 0x{:08x}".format(
                self.exception_class.__name__, self.position))

    def describe_mismatch (self, item, description):
        if self.actual is None:
            description.append_text("nothing was raised")

        else:
            description.append_text("raised ") \
                    .append_text(repr(self.actual))
