"""Static reference data for Motion components, APIs and hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from motiontools.tools.models import CodeSample, ComponentSummary

ComponentType = Literal["React Component", "JavaScript API", "React Hook"]


@dataclass(frozen=True, slots=True)
class ComponentEntry:
    type: ComponentType
    description: str
    category: str
    examples: tuple[CodeSample, ...]
    props: tuple[str, ...] | None = None
    parameters: tuple[str, ...] | None = None
    returns: tuple[str, ...] | None = None


DEFAULT_SUGGESTIONS: tuple[str, ...] = ("motion.div", "animate", "useAnimate")

MOTION_COMPONENTS: dict[str, ComponentEntry] = {
    # ─── React components ─────────────────────────────────────────────
    "motion.div": ComponentEntry(
        type="React Component",
        description="Animated div element with Motion props",
        category="react",
        examples=(
            CodeSample(title="Basic Animation", code="""\
<motion.div
  animate={{ x: 100, y: 100 }}
  transition={{ duration: 2 }}
>
  Animated div
</motion.div>"""),
            CodeSample(title="Spring Animation", code="""\
<motion.div
  animate={{ scale: 1.2 }}
  transition={{ type: "spring", stiffness: 300 }}
>
  Spring animated div
</motion.div>"""),
        ),
        props=("animate", "initial", "exit", "transition", "whileHover", "whileTap", "whileDrag", "layout"),
    ),
    "motion.button": ComponentEntry(
        type="React Component",
        description="Animated button element with Motion props",
        category="react",
        examples=(
            CodeSample(title="Interactive Button", code="""\
<motion.button
  whileHover={{ scale: 1.05 }}
  whileTap={{ scale: 0.95 }}
  transition={{ type: "spring", stiffness: 400, damping: 17 }}
>
  Click me
</motion.button>"""),
        ),
        props=("animate", "initial", "exit", "transition", "whileHover", "whileTap", "whileDrag"),
    ),
    # ─── JavaScript APIs ──────────────────────────────────────────────
    "animate": ComponentEntry(
        type="JavaScript API",
        description="Animate elements using CSS selectors or DOM elements",
        category="javascript",
        examples=(
            CodeSample(title="Basic CSS Selector Animation", code="""\
import { animate } from "motion";

animate("#box", { x: 100, rotate: 45 });"""),
            CodeSample(title="DOM Element Animation with Options", code="""\
import { animate } from "motion";

const element = document.querySelector(".target");
animate(element,
  { opacity: [0, 1], scale: [0.8, 1] },
  { duration: 1, ease: "easeOut" }
);"""),
            CodeSample(title="Keyframes Animation", code="""\
import { animate } from "motion";

animate(".circle", {
  x: [0, 100, 0],
  y: [0, -100, 0]
}, {
  duration: 2,
  repeat: Infinity
});"""),
        ),
        parameters=("target", "keyframes", "options"),
    ),
    "timeline": ComponentEntry(
        type="JavaScript API",
        description="Create complex, sequenced animations",
        category="javascript",
        examples=(
            CodeSample(title="Sequential Animation", code="""\
import { timeline } from "motion";

timeline([
  [".box1", { x: 100 }],
  [".box2", { y: 100 }, { at: "-0.5" }],
  [".box3", { rotate: 180 }, { at: "<" }]
]);"""),
        ),
        parameters=("sequence", "options"),
    ),
    # ─── React hooks ──────────────────────────────────────────────────
    "useAnimate": ComponentEntry(
        type="React Hook",
        description="Hook for imperative animations in React",
        category="hooks",
        examples=(
            CodeSample(title="Basic useAnimate", code="""\
import { useAnimate } from "motion/react";

function Component() {
  const [scope, animate] = useAnimate();

  return (
    <div ref={scope}>
      <button onClick={() => animate(scope.current, { x: 100 })}>
        Animate
      </button>
    </div>
  );
}"""),
        ),
        returns=("scope", "animate"),
    ),
    "useSpring": ComponentEntry(
        type="React Hook",
        description="Create spring-animated values",
        category="hooks",
        examples=(
            CodeSample(title="Spring Value", code="""\
import { useSpring } from "motion/react";

function Component() {
  const spring = useSpring(0, { stiffness: 300, damping: 30 });

  return (
    <motion.div style={{ x: spring }}>
      <button onClick={() => spring.set(100)}>
        Animate
      </button>
    </motion.div>
  );
}"""),
        ),
        parameters=("initialValue", "options"),
    ),
    "useScroll": ComponentEntry(
        type="React Hook",
        description="Track scroll progress and create scroll-linked animations",
        category="hooks",
        examples=(
            CodeSample(title="Scroll Progress", code="""\
import { useScroll, useTransform, motion } from "motion/react";

function Component() {
  const { scrollYProgress } = useScroll();
  const scale = useTransform(scrollYProgress, [0, 1], [1, 2]);

  return (
    <motion.div style={{ scale }}>
      Scales as you scroll
    </motion.div>
  );
}"""),
        ),
        returns=("scrollX", "scrollY", "scrollXProgress", "scrollYProgress"),
    ),
}


def _summary(name: str, description: str, usage: str) -> ComponentSummary:
    return ComponentSummary(name=name, description=description, usage=usage)


COMPONENT_LISTING: dict[str, tuple[ComponentSummary, ...]] = {
    "react": (
        _summary("motion.div", "Animated div element with Motion props", "<motion.div animate={{ x: 100 }} />"),
        _summary("motion.button", "Animated button element with Motion props",
                 "<motion.button whileHover={{ scale: 1.05 }} />"),
        _summary("motion.img", "Animated image element with Motion props", '<motion.img layoutId="hero" />'),
        _summary("motion.span", "Animated span element with Motion props", "<motion.span animate={{ opacity: 1 }} />"),
        _summary("motion.p", "Animated paragraph element with Motion props",
                 "<motion.p initial={{ y: 20 }} animate={{ y: 0 }} />"),
        _summary("AnimatePresence", "Component to animate components when they are removed from the tree",
                 "<AnimatePresence>{show && <motion.div exit={{ opacity: 0 }} />}</AnimatePresence>"),
        _summary("LazyMotion", "Reduce bundle size by loading features on demand",
                 "<LazyMotion features={domMax}><motion.div /></LazyMotion>"),
        _summary("MotionConfig", "Configure Motion settings for child components",
                 "<MotionConfig transition={{ duration: 0.5 }}><motion.div /></MotionConfig>"),
    ),
    "javascript": (
        _summary("animate", "Animate elements using CSS selectors or DOM elements", 'animate("#box", { x: 100 })'),
        _summary("timeline", "Create complex, sequenced animations",
                 'timeline([["#box1", { x: 100 }], ["#box2", { y: 100 }]])'),
        _summary("scroll", "Create scroll-triggered animations", 'scroll(animate("#box", { x: 100 }))'),
        _summary("inView", "Trigger animations when elements come into view",
                 'inView("#box", () => animate("#box", { opacity: 1 }))'),
        _summary("stagger", "Create staggered animations for multiple elements",
                 'animate(".item", { x: 100 }, { delay: stagger(0.1) })'),
    ),
    "hooks": (
        _summary("useAnimate", "Hook for imperative animations in React", "const [scope, animate] = useAnimate()"),
        _summary("useSpring", "Create spring-animated values", "const spring = useSpring(0, { stiffness: 300 })"),
        _summary("useScroll", "Track scroll progress and create scroll-linked animations",
                 "const { scrollYProgress } = useScroll()"),
        _summary("useTransform", "Transform one motion value into another",
                 "const y = useTransform(scrollYProgress, [0, 1], [0, -100])"),
        _summary("useMotionValue", "Create a motion value to track animated values", "const x = useMotionValue(0)"),
        _summary("useAnimationControls", "Create imperative animation controls",
                 "const controls = useAnimationControls()"),
        _summary("useInView", "Track when an element is in view", "const { ref, inView } = useInView()"),
        _summary("useDragControls", "Create custom drag controls", "const dragControls = useDragControls()"),
    ),
    "gestures": (
        _summary("whileHover", "Animation state while hovering", "<motion.div whileHover={{ scale: 1.1 }} />"),
        _summary("whileTap", "Animation state while tapping/clicking", "<motion.div whileTap={{ scale: 0.9 }} />"),
        _summary("whileDrag", "Animation state while dragging", "<motion.div drag whileDrag={{ scale: 1.2 }} />"),
        _summary("whileInView", "Animation state while element is in viewport",
                 "<motion.div whileInView={{ opacity: 1 }} />"),
        _summary("drag", "Make elements draggable", "<motion.div drag />"),
        _summary("dragConstraints", "Constrain drag movements",
                 "<motion.div drag dragConstraints={{ left: 0, right: 300 }} />"),
    ),
    "layout": (
        _summary("layout", "Automatically animate layout changes", "<motion.div layout />"),
        _summary("layoutId", "Share layout animations between components", '<motion.div layoutId="shared-element" />'),
        _summary("layoutScroll", "Maintain scroll position during layout animations",
                 "<motion.div layout layoutScroll />"),
        _summary("layoutRoot", "Create a new layout animation context", "<motion.div layoutRoot />"),
        _summary("LayoutGroup", "Group related layout animations",
                 '<LayoutGroup><motion.div layoutId="item" /></LayoutGroup>'),
    ),
}

GETTING_STARTED: dict[str, str] = {
    "react": "npm install motion",
    "javascript": 'import { animate } from "motion"',
    "documentation": "https://motion.dev/docs",
}
