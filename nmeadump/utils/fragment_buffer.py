from nmeadump.models import AISFragment, AssembledPayload


class FragmentBuffer:
    """Handles buffering and reassembly of multipart AIS messages.

    Only one collection is in flight at a time. Fragments must arrive in
    order, starting at 1, all sharing the sentence id (VDM or VDO) and the
    declared number of fragments. Anything else drops the collection rather
    than handing a wrongly assembled payload to the decoder.
    """

    def __init__(self, reporter):
        self.reporter = reporter
        self.fragments = []
        self.dropped_collections = 0
        self.dropped_fragments = 0
        self.assembled_messages = 0

    def __len__(self):
        return len(self.fragments)

    @property
    def sentence_id(self):
        return self.fragments[-1].sentence_id if self.fragments else None

    @property
    def n_fragments(self):
        return self.fragments[-1].n_fragments if self.fragments else None

    def accept(self, sentence):
        """Add a fragment and return the assembled payload once complete."""
        if not isinstance(sentence, AISFragment):
            # not VDM nor VDO
            if self.fragments:
                self.dropped_collections += 1
            self.fragments.clear()
            self.reporter.error(sentence.raw, "ignoring AIS sentence, dropping collection.")
            return None

        warned = False
        if self.fragments and (sentence.sentence_id != self.sentence_id
                               or sentence.n_fragments != self.n_fragments):
            warned = self.discard(
                f"{sentence.sentence_id.value} {sentence.fragment}/{sentence.n_fragments} does not continue "
                f"{self.sentence_id.value} {len(self)}/{self.n_fragments}"
            )

        if len(self.fragments) >= sentence.fragment:
            warned = self.discard(
                f"fragment {sentence.fragment}/{sentence.n_fragments} arrived with {len(self)} already collected"
            ) or warned

        expected = len(self.fragments) + 1
        if sentence.fragment != expected:
            # neither the next fragment nor the start of a new collection
            dropped = "collection" if self.fragments else "fragment"
            if self.fragments:
                self.dropped_collections += 1
            self.fragments.clear()
            self.dropped_fragments += 1
            if not warned:
                self.reporter.warning(
                    f"missing fragment {expected}/{sentence.n_fragments}, dropping {dropped}."
                )
            return None

        self.fragments.append(sentence)
        if sentence.fragment < sentence.n_fragments:
            return None

        assembled = self._assemble()
        self.fragments.clear()
        self.assembled_messages += 1
        return assembled

    def discard(self, reason=None):
        """Drop the current collection. Returns True if anything was dropped."""
        if not self.fragments:
            return False
        self.fragments.clear()
        self.dropped_collections += 1
        self.reporter.warning(f"dropping collection. ({reason})" if reason else "dropping collection.")
        return True

    def clear(self):
        """Reset without reporting, used when the stream ends."""
        self.fragments.clear()

    def _assemble(self):
        last = self.fragments[-1]
        return AssembledPayload(
            sentence_id=last.sentence_id,
            payload=''.join(fragment.payload for fragment in self.fragments),
            fill_bits=last.fill_bits,
            channel=last.channel,
            n_fragments=last.n_fragments,
            lines=tuple(fragment.raw for fragment in self.fragments),
        )

    def get_stats(self):
        """Get buffer statistics."""
        return {
            'buffered_fragments': len(self.fragments),
            'buffered_collection': f"{len(self.fragments)}/{self.n_fragments}" if self.fragments else None,
            'assembled_messages': self.assembled_messages,
            'dropped_collections': self.dropped_collections,
            'dropped_fragments': self.dropped_fragments,
        }
