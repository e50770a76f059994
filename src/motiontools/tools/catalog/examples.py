"""Animation pattern examples and the searchable snippet index."""

from __future__ import annotations

from dataclasses import dataclass

from motiontools.tools.models import FrameworkSample, SearchHit


@dataclass(frozen=True, slots=True)
class ExampleEntry:
    title: str
    description: str
    category: str
    examples: tuple[FrameworkSample, ...]
    related_topics: tuple[str, ...]


DEFAULT_SUGGESTIONS: tuple[str, ...] = ("spring-animation", "drag-gesture", "layout-animation")

TIPS: tuple[str, ...] = (
    'Always import Motion components from "motion/react" for React projects',
    "Use TypeScript for better development experience and type safety",
    "Consider performance with many animated elements - use transform properties when possible",
    "Test animations on different devices and screen sizes",
)

PLAYGROUND = "https://motion.dev/examples"


def _react(code: str) -> FrameworkSample:
    return FrameworkSample(framework="React", code=code)


def _js(code: str) -> FrameworkSample:
    return FrameworkSample(framework="JavaScript", code=code)


MOTION_EXAMPLES: dict[str, ExampleEntry] = {
    "spring-animation": ExampleEntry(
        title="Spring Animation",
        description="Smooth spring-based animations with customizable physics",
        category="animations",
        examples=(
            _react("""\
import { motion } from "motion/react";

function SpringButton() {
  return (
    <motion.button
      whileHover={{ scale: 1.1 }}
      whileTap={{ scale: 0.95 }}
      transition={{ type: "spring", stiffness: 400, damping: 17 }}
      className="px-6 py-3 bg-blue-500 text-white rounded-lg"
    >
      Spring Button
    </motion.button>
  );
}"""),
            _js("""\
import { animate } from "motion";

const button = document.querySelector(".spring-button");
const spring = { type: "spring", stiffness: 400, damping: 17 };

button.addEventListener("mouseenter", () => animate(button, { scale: 1.1 }, spring));
button.addEventListener("mouseleave", () => animate(button, { scale: 1 }, spring));"""),
        ),
        related_topics=("transitions", "hover-effects", "gestures"),
    ),
    "drag-gesture": ExampleEntry(
        title="Drag Gesture",
        description="Interactive dragging with constraints and snap-back behavior",
        category="gestures",
        examples=(
            _react("""\
import { motion } from "motion/react";

function DraggableCard() {
  return (
    <motion.div
      drag
      dragConstraints={{ top: -50, left: -50, right: 50, bottom: 50 }}
      dragElastic={0.1}
      whileDrag={{ scale: 1.1, zIndex: 1 }}
      className="w-32 h-32 rounded-xl cursor-grab active:cursor-grabbing"
    >
      Drag me!
    </motion.div>
  );
}"""),
            _js("""\
import { animate } from "motion";

const draggable = document.querySelector(".draggable");
let isDragging = false;
let startX, startY, currentX = 0, currentY = 0;

draggable.addEventListener("mousedown", (e) => {
  isDragging = true;
  startX = e.clientX - currentX;
  startY = e.clientY - currentY;
  animate(draggable, { scale: 1.1 }, { duration: 0.1 });
});

document.addEventListener("mousemove", (e) => {
  if (!isDragging) return;
  currentX = Math.max(-50, Math.min(50, e.clientX - startX));
  currentY = Math.max(-50, Math.min(50, e.clientY - startY));
  draggable.style.transform = `translate(${currentX}px, ${currentY}px)`;
});

document.addEventListener("mouseup", () => {
  if (!isDragging) return;
  isDragging = false;
  animate(draggable, { scale: 1 }, { duration: 0.1 });
});"""),
        ),
        related_topics=("constraints", "gestures", "interactive-animations"),
    ),
    "layout-animation": ExampleEntry(
        title="Layout Animation",
        description="Smooth animations when elements change size or position in the layout",
        category="layout",
        examples=(
            _react("""\
import { motion, AnimatePresence } from "motion/react";
import { useState } from "react";

function ExpandableCard() {
  const [isExpanded, setIsExpanded] = useState(false);

  return (
    <motion.div
      layout
      onClick={() => setIsExpanded(!isExpanded)}
      transition={{ type: "spring", stiffness: 300, damping: 30 }}
    >
      <motion.h2 layout>Expandable Card</motion.h2>
      <AnimatePresence>
        {isExpanded && (
          <motion.p
            initial={{ opacity: 0, height: 0 }}
            animate={{ opacity: 1, height: "auto" }}
            exit={{ opacity: 0, height: 0 }}
          >
            Content appears smoothly as the card grows.
          </motion.p>
        )}
      </AnimatePresence>
    </motion.div>
  );
}"""),
            _js("""\
import { timeline } from "motion";

const card = document.querySelector(".expandable-card");
const content = document.querySelector(".expandable-content");
let isExpanded = false;

card.addEventListener("click", () => {
  timeline(isExpanded
    ? [[content, { opacity: 0 }], [card, { height: "60px" }, { at: "-0.1" }]]
    : [[card, { height: "auto" }], [content, { opacity: [0, 1] }, { at: "<" }]],
    { duration: 0.3, ease: "easeOut" });
  isExpanded = !isExpanded;
});"""),
        ),
        related_topics=("layout", "animate-presence", "height-animations"),
    ),
    "scroll-triggered": ExampleEntry(
        title="Scroll-Triggered Animation",
        description="Animations that trigger based on scroll position and element visibility",
        category="scroll",
        examples=(
            _react("""\
import { motion, useScroll, useTransform } from "motion/react";
import { useRef } from "react";

function ScrollAnimation() {
  const ref = useRef(null);
  const { scrollYProgress } = useScroll({ target: ref, offset: ["start end", "end start"] });
  const y = useTransform(scrollYProgress, [0, 1], [100, -100]);
  const opacity = useTransform(scrollYProgress, [0, 0.3, 0.7, 1], [0, 1, 1, 0]);

  return (
    <motion.div ref={ref} style={{ y, opacity }}>
      <motion.h1 initial={{ scale: 0.8 }} whileInView={{ scale: 1 }}>
        Scroll Magic
      </motion.h1>
    </motion.div>
  );
}"""),
            _js("""\
import { scroll, animate, inView } from "motion";

scroll(animate(".parallax-element", { y: [0, -200] }));

inView(".fade-in-element", (info) => {
  animate(info.target, { opacity: [0, 1], y: [50, 0] }, { duration: 0.6, ease: "easeOut" });
});

const progressBar = document.querySelector(".progress-bar");
scroll(({ y }) => {
  progressBar.style.transform = `scaleX(${y.progress})`;
});"""),
        ),
        related_topics=("scroll", "parallax", "in-view", "progress-indicators"),
    ),
    "stagger-animation": ExampleEntry(
        title="Stagger Animation",
        description="Sequential animations with delays for multiple elements",
        category="animations",
        examples=(
            _react("""\
import { motion } from "motion/react";

const items = [1, 2, 3, 4, 5];

function StaggerList() {
  return (
    <div>
      {items.map((item, index) => (
        <motion.div
          key={item}
          initial={{ opacity: 0, x: -20 }}
          animate={{ opacity: 1, x: 0 }}
          transition={{ delay: index * 0.1, type: "spring", stiffness: 100 }}
        >
          Item {item}
        </motion.div>
      ))}
    </div>
  );
}"""),
            _js("""\
import { animate, stagger } from "motion";

animate(".list-item", { opacity: [0, 1], y: [20, 0] },
  { delay: stagger(0.1), duration: 0.5, ease: "easeOut" });

animate(".grid-item", { scale: [0, 1], rotate: [180, 0] },
  { delay: stagger(0.05, { from: "center" }), duration: 0.3 });"""),
        ),
        related_topics=("stagger", "lists", "sequential-animations"),
    ),
}


# ═════════════════════════════════════════════════════════════════════════════
# Search Index
# ═════════════════════════════════════════════════════════════════════════════

SEARCH_CATEGORIES: tuple[str, ...] = ("animations", "gestures", "layout", "scroll", "text")

SEARCH_SUGGESTIONS: tuple[str, ...] = (
    'Try broader terms like "animation", "gesture", or "scroll"',
    'Search for specific components like "button", "modal", or "card"',
    'Look for animation types like "spring", "fade", or "slide"',
)

POPULAR_EXAMPLES: tuple[str, ...] = ("spring-button", "drag-card", "fade-in-list", "parallax-scroll")

SEARCHABLE_EXAMPLES: tuple[SearchHit, ...] = (
    SearchHit(
        id="spring-button",
        title="Spring Button Animation",
        description="Interactive button with spring physics on hover and tap",
        tags=("button", "spring", "hover", "tap", "interactive"),
        category="gestures",
        difficulty="beginner",
        code="""\
<motion.button
  whileHover={{ scale: 1.05 }}
  whileTap={{ scale: 0.95 }}
  transition={{ type: "spring", stiffness: 400, damping: 17 }}
>
  Click me
</motion.button>""",
    ),
    SearchHit(
        id="drag-card",
        title="Draggable Card",
        description="Card component that can be dragged with constraints and elastic behavior",
        tags=("drag", "card", "constraints", "elastic", "gesture"),
        category="gestures",
        difficulty="intermediate",
        code="""\
<motion.div
  drag
  dragConstraints={{ left: -100, right: 100, top: -100, bottom: 100 }}
  dragElastic={0.1}
  whileDrag={{ scale: 1.1 }}
>
  Drag me around!
</motion.div>""",
    ),
    SearchHit(
        id="fade-in-list",
        title="Staggered Fade-in List",
        description="List items that fade in with staggered timing",
        tags=("list", "stagger", "fade", "opacity", "animation"),
        category="animations",
        difficulty="beginner",
        code="""\
{items.map((item, index) => (
  <motion.div
    key={item.id}
    initial={{ opacity: 0, y: 20 }}
    animate={{ opacity: 1, y: 0 }}
    transition={{ delay: index * 0.1 }}
  >
    {item.content}
  </motion.div>
))}""",
    ),
    SearchHit(
        id="parallax-scroll",
        title="Parallax Scroll Effect",
        description="Background elements that move at different speeds during scroll",
        tags=("parallax", "scroll", "background", "transform", "useScroll"),
        category="scroll",
        difficulty="advanced",
        code="""\
const { scrollYProgress } = useScroll();
const y = useTransform(scrollYProgress, [0, 1], ["0%", "50%"]);

return <motion.div style={{ y }} className="parallax-background" />;""",
    ),
    SearchHit(
        id="modal-animation",
        title="Animated Modal",
        description="Modal that slides in from bottom with backdrop fade",
        tags=("modal", "slide", "backdrop", "overlay", "animate-presence"),
        category="layout",
        difficulty="intermediate",
        code="""\
<AnimatePresence>
  {isOpen && (
    <motion.div
      initial={{ y: "100%" }}
      animate={{ y: 0 }}
      exit={{ y: "100%" }}
      className="modal"
    >
      Modal content
    </motion.div>
  )}
</AnimatePresence>""",
    ),
    SearchHit(
        id="loading-spinner",
        title="Loading Spinner",
        description="Rotating loading spinner with smooth animation",
        tags=("loading", "spinner", "rotate", "infinite", "transition"),
        category="animations",
        difficulty="beginner",
        code="""\
<motion.div
  animate={{ rotate: 360 }}
  transition={{ duration: 1, repeat: Infinity, ease: "linear" }}
  className="spinner"
/>""",
    ),
    SearchHit(
        id="hero-text-animation",
        title="Hero Text Animation",
        description="Large hero text that animates in with typewriter effect",
        tags=("text", "hero", "typewriter", "stagger", "letters"),
        category="text",
        difficulty="advanced",
        code="""\
{Array.from("Hello World").map((letter, index) => (
  <motion.span
    key={index}
    initial={{ opacity: 0, y: 50 }}
    animate={{ opacity: 1, y: 0 }}
    transition={{ delay: index * 0.1 }}
  >
    {letter === " " ? "\\u00A0" : letter}
  </motion.span>
))}""",
    ),
    SearchHit(
        id="image-gallery",
        title="Animated Image Gallery",
        description="Image gallery with hover effects and layout animations",
        tags=("gallery", "images", "grid", "hover", "layout"),
        category="layout",
        difficulty="intermediate",
        code="""\
<motion.div layout whileHover={{ scale: 1.05 }} className="image-container">
  <motion.img src={image.src} alt={image.alt} layoutId={image.id} />
</motion.div>""",
    ),
    SearchHit(
        id="navigation-menu",
        title="Animated Navigation Menu",
        description="Mobile navigation menu that slides in from the side",
        tags=("navigation", "menu", "mobile", "slide", "hamburger"),
        category="layout",
        difficulty="intermediate",
        code="""\
<motion.nav
  initial={{ x: "-100%" }}
  animate={{ x: isOpen ? 0 : "-100%" }}
  transition={{ type: "spring", stiffness: 300, damping: 30 }}
>
  {menuItems.map(item => (
    <motion.a key={item.id} whileHover={{ x: 10 }} href={item.href}>
      {item.label}
    </motion.a>
  ))}
</motion.nav>""",
    ),
    SearchHit(
        id="progress-bar",
        title="Animated Progress Bar",
        description="Progress bar that fills based on scroll position",
        tags=("progress", "bar", "scroll", "indicator", "transform"),
        category="scroll",
        difficulty="beginner",
        code="""\
const { scrollYProgress } = useScroll();

return <motion.div className="progress-bar" style={{ scaleX: scrollYProgress }} />;""",
    ),
)
