import unittest

from pagewise.core.constants import DestinationType, LinkType, NotifyLevel
from pagewise.core.geometry import Rectangle
from pagewise.core.links import (
    GotoDestination,
    GotoRemote,
    Link,
    NoTarget,
    TargetSpec,
    Uri,
    describe,
)
from pagewise.viewer.state import PageViewState

from support import FakeLauncher, Recorder, make_session

AREA = Rectangle(0, 0, 10, 10)


def goto(page, left=10, top=20, destination_type=DestinationType.XYZ, scale=0.0):
    return Link.new(
        LinkType.GOTO_DEST,
        AREA,
        TargetSpec(
            page_number=page,
            destination_type=destination_type,
            left=left,
            top=top,
            scale=scale,
        ),
    )


class LinkConstructionTests(unittest.TestCase):
    def test_variants(self):
        self.assertIsInstance(Link.new(LinkType.NONE, AREA).target, NoTarget)
        self.assertEqual(goto(3).target, GotoDestination(3, DestinationType.XYZ, 10, 20, 0.0))
        remote = Link.new(LinkType.GOTO_REMOTE, AREA, TargetSpec("other.pdf"))
        self.assertEqual(remote.target, GotoRemote("other.pdf"))
        self.assertEqual(remote.type, LinkType.GOTO_REMOTE)

    def test_raw_integer_discriminant(self):
        link = Link.new(3, AREA, TargetSpec("https://example.org"))
        self.assertEqual(link.target, Uri("https://example.org"))

    def test_unknown_type_is_rejected(self):
        self.assertIsNone(Link.new(42, AREA))
        self.assertIsNone(Link.new(LinkType.INVALID, AREA))

    def test_string_types_need_a_value(self):
        for link_type in (LinkType.GOTO_REMOTE, LinkType.URI, LinkType.LAUNCH, LinkType.NAMED):
            self.assertIsNone(Link.new(link_type, AREA, TargetSpec(None)))
            self.assertIsNone(Link.new(link_type, AREA, TargetSpec("")))

    def test_describe(self):
        self.assertEqual(describe(goto(4)), "Link: page 4")
        self.assertEqual(
            describe(Link.new(LinkType.NAMED, AREA, TargetSpec("NextPage"))), "Link: NextPage"
        )
        self.assertEqual(describe(Link.new(LinkType.NONE, AREA)), "Link: Invalid")


class HintTests(unittest.TestCase):
    def test_hint_numbers_are_offset_per_page(self):
        state = PageViewState(2, [goto(1), goto(2)])
        state.draw_links = True
        state.link_offset = 3
        self.assertIs(state.link_for_hint(4), state.links[0])
        self.assertIs(state.link_for_hint(5), state.links[1])
        self.assertIsNone(state.link_for_hint(3))
        self.assertIsNone(state.link_for_hint(6))

    def test_hidden_hints_resolve_nothing(self):
        state = PageViewState(0, [goto(1)])
        self.assertIsNone(state.link_for_hint(1))


class FollowLinkTests(unittest.TestCase):
    def test_follow_xyz_destination(self):
        session = make_session(links={0: [goto(3)]})
        requests = Recorder(session.input_requested)
        positions = Recorder(session.position_requested)

        session.set_visible_pages([0])
        self.assertTrue(session.follow_links())
        self.assertEqual(requests.last, ("Follow link:", ""))

        link = session.choose_link("1")
        session.flush_pending_position()

        self.assertIs(link, session.page_states[0].links[0])
        self.assertEqual(session.document.current_page_index, 3)
        self.assertEqual(positions.last, (10.0, 323.0))
        self.assertEqual([e.page for e in session.jumplist.entries], [0, 3])
        self.assertFalse(session.page_states[0].draw_links)

    def test_follow_without_horizontal_adjust(self):
        session = make_session(links={0: [goto(3)]}, link_hadjust=False)
        positions = Recorder(session.position_requested)
        session.evaluate_link(goto(3))
        session.flush_pending_position()
        self.assertEqual(positions.last, (None, 323.0))

    def test_destination_scale_is_applied(self):
        session = make_session()
        session.evaluate_link(goto(1, destination_type=DestinationType.FIT, scale=2.0))
        self.assertEqual(session.document.scale, 2.0)
        self.assertEqual(session.document.current_page_index, 1)

    def test_unknown_destination_does_nothing(self):
        session = make_session()
        session.evaluate_link(goto(5, destination_type=DestinationType.UNKNOWN))
        self.assertEqual(session.document.current_page_index, 0)

    def test_no_links_on_visible_pages(self):
        session = make_session(links={5: [goto(1)]})
        session.set_visible_pages([0, 1])
        self.assertFalse(session.follow_links())
        self.assertFalse(session.display_links())

    def test_invalid_hint_input(self):
        session = make_session(links={0: [goto(3)]})
        session.set_visible_pages([0])
        session.follow_links()
        self.assertIsNone(session.choose_link("abc"))
        self.assertIsNone(session.choose_link("7"))
        self.assertEqual(session.document.current_page_index, 0)

    def test_input_mode_is_restored(self):
        session = make_session(links={0: [goto(3)]})
        session.set_visible_pages([0])
        session.follow_links()
        self.assertEqual(session.document.adjust_mode.name, "INPUTBAR")
        session.choose_link("1")
        self.assertEqual(session.document.adjust_mode.name, "NONE")

    def test_remote_document_opens_in_new_viewer(self):
        launcher = FakeLauncher()
        session = make_session(launcher=launcher)
        session.evaluate_link(Link.new(LinkType.GOTO_REMOTE, AREA, TargetSpec("other.pdf")))
        self.assertEqual(launcher.documents, ["/docs/other.pdf"])

    def test_uri_failure_is_reported(self):
        launcher = FakeLauncher(succeed=False)
        session = make_session(launcher=launcher)
        notes = Recorder(session.notification)
        session.evaluate_link(Link.new(LinkType.URI, AREA, TargetSpec("https://example.org")))
        self.assertEqual(launcher.uris, ["https://example.org"])
        self.assertEqual(notes.last, (NotifyLevel.ERROR, "Failed to open link."))

    def test_launch_resolves_relative_path(self):
        launcher = FakeLauncher()
        session = make_session(launcher=launcher)
        session.evaluate_link(Link.new(LinkType.LAUNCH, AREA, TargetSpec("notes.txt")))
        self.assertEqual(launcher.paths, ["/docs/notes.txt"])


class DisplayLinkTests(unittest.TestCase):
    def test_display_chosen_link(self):
        session = make_session(links={0: [goto(3)], 1: [goto(7)]})
        notes = Recorder(session.notification)
        session.set_visible_pages([0, 1])
        self.assertTrue(session.display_links())
        self.assertEqual(session.page_states[1].link_offset, 1)

        session.choose_link("2", follow=False)
        self.assertEqual(notes.last, (NotifyLevel.INFO, "Link: page 7"))
        self.assertEqual(session.document.current_page_index, 0)

    def test_display_invalid_link_is_an_error(self):
        session = make_session()
        notes = Recorder(session.notification)
        session.display_link(None)
        self.assertEqual(notes.last, (NotifyLevel.ERROR, "Link: Invalid"))
        session.display_link(Link.new(LinkType.NONE, AREA))
        self.assertEqual(notes.last, (NotifyLevel.ERROR, "Link: Invalid"))
        session.display_link(Link.new(LinkType.NAMED, AREA, TargetSpec("Invalid")))
        self.assertEqual(notes.last, (NotifyLevel.INFO, "Link: Invalid"))


if __name__ == "__main__":
    unittest.main()
